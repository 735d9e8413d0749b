from fastapi import Request

from core.game_service import GameService


def get_game_service(request: Request) -> GameService:
    """
    FastAPI dependency：提供 GameService

    Service 由 create_app() 建立並放在 app.state，
    整個應用共用同一個 instance（同一份 Result Log）
    """
    return request.app.state.game_service
