"""
Logging 設定

各模組照常使用 logging.getLogger(__name__)，
這裡只在應用啟動時設定 root logger（文字或 JSON 格式）
"""
import json
import logging
import logging.config

CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """一行一筆 JSON（time / level / logger / message）"""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "time": self.formatTime(record, DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """
    設定 root logger

    參數：
        level: Logging level 名稱（不分大小寫）
        json_logs: True 時輸出 JSON

    注意：
        disable_existing_loggers=False，uvicorn 的 logger 照常運作
    """
    level = level.upper()
    formatter = {"()": JsonFormatter} if json_logs else {"format": CONSOLE_FORMAT, "datefmt": DATE_FORMAT}

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": formatter},
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": level,
            }
        },
        "root": {"handlers": ["default"], "level": level},
    })
