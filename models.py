"""
Domain models：出拳、請求與回合結果

全部都是不可變物件，建立後不能修改
"""
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Move(str, Enum):
    """剪刀石頭布的三種出拳"""
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


@dataclass(frozen=True)
class PlayRequest:
    """玩家的一次出拳（已經在 API 層驗證過）"""
    player_move: Move


@dataclass(frozen=True)
class PlayOutcome:
    """
    一個已完成的回合

    注意：
        player_won 只區分「贏」和「沒贏」，平手和輸都是 False
    """
    occurred_at: datetime
    player_move: Move
    opponent_move: Move
    player_won: bool


@dataclass(frozen=True)
class ResultsSummary:
    """Result Log 的統計（played = won + not_won）"""
    played: int
    won: int
    not_won: int
