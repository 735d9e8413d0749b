"""
自定義異常類別

集中管理所有遊戲異常，方便 API 層統一處理
"""


class GameException(Exception):
    """所有遊戲異常的基類"""
    pass


# ============ Move 相關異常 ============

class InvalidMove(GameException, ValueError):
    """出拳不是 rock / paper / scissors 之一

    繼承 ValueError，讓 pydantic validator 直接轉成 422 回應
    """
    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Invalid move {value!r}, expected one of: rock, paper, scissors"
        )
