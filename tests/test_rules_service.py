from __future__ import annotations

import itertools

import pytest

from core.exceptions import GameException, InvalidMove
from models import Move
from services.rules_service import WINNING_PAIRS, parse_move, player_wins


def test_player_wins_matrix() -> None:
    assert player_wins(Move.ROCK, Move.SCISSORS) is True
    assert player_wins(Move.PAPER, Move.ROCK) is True
    assert player_wins(Move.SCISSORS, Move.PAPER) is True

    assert player_wins(Move.SCISSORS, Move.ROCK) is False
    assert player_wins(Move.ROCK, Move.PAPER) is False
    assert player_wins(Move.PAPER, Move.SCISSORS) is False


@pytest.mark.parametrize("move", list(Move))
def test_tie_is_not_a_win(move: Move) -> None:
    assert player_wins(move, move) is False


def test_exactly_three_of_nine_pairs_win() -> None:
    winners = [pair for pair in itertools.product(Move, repeat=2) if player_wins(*pair)]
    assert len(winners) == 3
    assert set(winners) == WINNING_PAIRS


@pytest.mark.parametrize("raw", ["rock", "paper", "scissors"])
def test_parse_move_accepts_the_three_values(raw: str) -> None:
    assert parse_move(raw) == Move(raw)


def test_parse_move_passes_move_through() -> None:
    assert parse_move(Move.PAPER) is Move.PAPER


@pytest.mark.parametrize("raw", ["lizard", "Rock", " rock", "", None, 1])
def test_parse_move_rejects_anything_else(raw) -> None:
    with pytest.raises(InvalidMove) as exc_info:
        parse_move(raw)
    assert exc_info.value.value == raw
    assert isinstance(exc_info.value, GameException)
    assert isinstance(exc_info.value, ValueError)
