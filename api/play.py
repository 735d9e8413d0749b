"""
Play API Endpoints

職責：
1. 驗證玩家出拳（schema 層，不合法直接 422）
2. 交給 GameService 評估回合
3. 把 PlayOutcome 轉成回應格式
"""
from fastapi import APIRouter, Depends

from dependencies import get_game_service
from schemas import PlaySubmit, PlayResultResponse
from core.game_service import GameService

router = APIRouter(tags=["play"])


@router.post("/play", response_model=PlayResultResponse)
def play(play_data: PlaySubmit, service: GameService = Depends(get_game_service)):
    """
    玩一回合剪刀石頭布

    參數：
        play_data: {"user_choice": "rock" | "paper" | "scissors"}

    返回：
        - timestamp: 評估時間（ISO-8601）
        - user_choice: 玩家出拳
        - api_choice: API 出拳
        - user_wins: 玩家是否獲勝（平手為 false）
    """
    outcome = service.play(play_data.to_request())
    return PlayResultResponse.from_outcome(outcome)
