"""
API Schemas（pydantic）

欄位名稱對外使用 user_choice / api_choice / user_wins，
對內轉成 PlayRequest / PlayOutcome
"""
from datetime import datetime

from pydantic import BaseModel, field_validator

from models import Move, PlayOutcome, PlayRequest, ResultsSummary
from services.rules_service import parse_move


class PlaySubmit(BaseModel):
    user_choice: Move

    @field_validator("user_choice", mode="before")
    @classmethod
    def check_user_choice(cls, value):
        # InvalidMove 是 ValueError，pydantic 會轉成 422
        return parse_move(value)

    def to_request(self) -> PlayRequest:
        return PlayRequest(player_move=self.user_choice)


class PlayResultResponse(BaseModel):
    timestamp: datetime
    user_choice: Move
    api_choice: Move
    user_wins: bool

    @classmethod
    def from_outcome(cls, outcome: PlayOutcome) -> "PlayResultResponse":
        return cls(
            timestamp=outcome.occurred_at,
            user_choice=outcome.player_move,
            api_choice=outcome.opponent_move,
            user_wins=outcome.player_won,
        )


class ResultsSummaryResponse(BaseModel):
    played: int
    won: int
    not_won: int

    @classmethod
    def from_summary(cls, summary: ResultsSummary) -> "ResultsSummaryResponse":
        return cls(played=summary.played, won=summary.won, not_won=summary.not_won)
