"""
Results API Endpoints

職責：
1. 列出 Result Log（依插入順序）
2. 回合統計
"""
from typing import List

from fastapi import APIRouter, Depends

from dependencies import get_game_service
from schemas import PlayResultResponse, ResultsSummaryResponse
from core.game_service import GameService

router = APIRouter(prefix="/results", tags=["results"])


@router.get("", response_model=List[PlayResultResponse])
def get_results(service: GameService = Depends(get_game_service)):
    """取得所有回合結果（最早的在前）"""
    return [PlayResultResponse.from_outcome(outcome) for outcome in service.get_results()]


@router.get("/summary", response_model=ResultsSummaryResponse)
def get_results_summary(service: GameService = Depends(get_game_service)):
    """
    取得回合統計

    返回：
        - played: 總回合數
        - won: 玩家獲勝次數
        - not_won: 平手或輸的次數
    """
    return ResultsSummaryResponse.from_summary(service.summary())
