"""
規則服務：剪刀石頭布的勝負判定

純計算邏輯，不涉及狀態
"""
from typing import Any, FrozenSet, Tuple

from models import Move
from core.exceptions import InvalidMove

# (玩家, 對手) -> 玩家獲勝
WINNING_PAIRS: FrozenSet[Tuple[Move, Move]] = frozenset({
    (Move.ROCK, Move.SCISSORS),
    (Move.PAPER, Move.ROCK),
    (Move.SCISSORS, Move.PAPER),
})


def player_wins(player_move: Move, opponent_move: Move) -> bool:
    """
    判斷玩家是否獲勝

    Payoff Matrix（True = 玩家贏）:
    ┌──────────────┬──────────┬──────────┬──────────────┐
    │              │ 對手: 石頭 │ 對手: 布  │ 對手: 剪刀    │
    ├──────────────┼──────────┼──────────┼──────────────┤
    │ 玩家: 石頭     │  False   │  False   │  True        │
    │ 玩家: 布       │  True    │  False   │  False       │
    │ 玩家: 剪刀     │  False   │  True    │  False       │
    └──────────────┴──────────┴──────────┴──────────────┘

    平手和輸都返回 False（不區分）

    參數：
        player_move: 玩家的出拳
        opponent_move: 對手的出拳

    返回：
        True 如果玩家贏，False 否則
    """
    return (player_move, opponent_move) in WINNING_PAIRS


def parse_move(value: Any) -> Move:
    """
    把外部輸入轉成 Move

    用途：
        API 層的 schema validator（service 本身不會再驗證）

    參數：
        value: 原始輸入（通常是 JSON 字串）

    返回：
        Move enum

    異常：
        InvalidMove: 不是 rock / paper / scissors
    """
    if isinstance(value, Move):
        return value
    if not isinstance(value, str):
        raise InvalidMove(value)
    try:
        return Move(value)
    except ValueError:
        raise InvalidMove(value) from None
