"""
Game Service：剪刀石頭布的回合評估與 Result Log

職責：
1. 評估一個回合（選對手出拳 + 判定勝負）
2. 維護 Result Log（只能 append，保留插入順序）
3. 提供 Result Log 的快照與統計

原則：
- 單一職責：只管回合評估，不管 HTTP
- 依賴注入：出拳來源和時鐘都從建構子傳入，測試可替換
- 一個 instance 擁有一份 Result Log，沒有全域狀態
"""
import logging
import threading
from datetime import datetime, timezone
from typing import Callable, List, Optional, Tuple

from models import Move, PlayOutcome, PlayRequest, ResultsSummary
from services.move_service import MoveSupplier, RandomMoveSupplier
from services.rules_service import player_wins

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class GameService:
    """回合評估服務（擁有自己的 Result Log）"""

    def __init__(
        self,
        move_supplier: Optional[MoveSupplier] = None,
        clock: Optional[Clock] = None,
    ):
        self._move_supplier = move_supplier if move_supplier is not None else RandomMoveSupplier()
        self._clock = clock if clock is not None else utc_now
        self._results: List[PlayOutcome] = []
        # append 和快照都要拿這把鎖（FastAPI 會在 threadpool 裡並發呼叫）
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._results)

    def choose_opponent_move(self) -> Move:
        """
        選出對手的出拳

        預設交給 move_supplier，子類別可以覆寫
        """
        return self._move_supplier()

    def play(self, request: PlayRequest) -> PlayOutcome:
        """
        評估一個回合

        流程：
        1. 選對手出拳
        2. 判定勝負
        3. 建立 PlayOutcome（蓋上當下時間）
        4. append 到 Result Log

        參數：
            request: 已驗證的 PlayRequest（這裡不會再驗證）

        返回：
            PlayOutcome

        注意：
            - 不會失敗，每次呼叫 Result Log 剛好多一筆
            - 時間戳在鎖內產生，所以 log 內的時間不會倒退
        """
        # 1. 選對手出拳
        opponent_move = self.choose_opponent_move()

        # 2. 判定勝負
        won = player_wins(request.player_move, opponent_move)

        # 3 + 4. 建立結果並 append
        with self._lock:
            outcome = PlayOutcome(
                occurred_at=self._clock(),
                player_move=request.player_move,
                opponent_move=opponent_move,
                player_won=won,
            )
            self._results.append(outcome)
            count = len(self._results)

        logger.info(
            "Round %d: player=%s opponent=%s player_won=%s",
            count,
            outcome.player_move.value,
            outcome.opponent_move.value,
            outcome.player_won,
        )
        return outcome

    def get_results(self) -> Tuple[PlayOutcome, ...]:
        """
        取得 Result Log 快照

        返回：
            依插入順序排列的 tuple（改不到內部的 list）
        """
        with self._lock:
            return tuple(self._results)

    def summary(self) -> ResultsSummary:
        """
        統計目前為止的回合

        返回：
            ResultsSummary（played / won / not_won，平手算在 not_won）
        """
        results = self.get_results()
        won = sum(1 for outcome in results if outcome.player_won)
        return ResultsSummary(
            played=len(results),
            won=won,
            not_won=len(results) - won,
        )
