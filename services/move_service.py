"""
出拳服務：提供對手（API）的出拳

GameService 只依賴「呼叫後返回一個 Move」的 callable，
測試時可以換成固定的出拳
"""
import itertools
import random
from typing import Callable, Iterable, Optional

from models import Move

MoveSupplier = Callable[[], Move]

ALL_MOVES = tuple(Move)


class RandomMoveSupplier:
    """
    從三種出拳中均勻隨機抽一個

    參數：
        rng: 可選的 random.Random（給定 seed 時結果可重現）
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()

    def __call__(self) -> Move:
        return self._rng.choice(ALL_MOVES)


class FixedMoveSupplier:
    """永遠返回同一個出拳"""

    def __init__(self, move: Move):
        self.move = move

    def __call__(self) -> Move:
        return self.move


class SequenceMoveSupplier:
    """
    依序返回給定的出拳，用完後從頭循環

    範例：
        supplier = SequenceMoveSupplier([Move.ROCK, Move.PAPER])
        supplier()  # Move.ROCK
        supplier()  # Move.PAPER
        supplier()  # Move.ROCK
    """

    def __init__(self, moves: Iterable[Move]):
        moves = list(moves)
        if not moves:
            raise ValueError("SequenceMoveSupplier needs at least one move")
        self._cycle = itertools.cycle(moves)

    def __call__(self) -> Move:
        return next(self._cycle)
