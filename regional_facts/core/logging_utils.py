"""
Centralized logging utilities for regional fact resolution

합성(synthesis) 단계에서 일관된 구조화 JSON 로그를 제공합니다.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone

LOG_LEVEL_ENV = "REGIONAL_FACTS_LOG_LEVEL"


def get_logger(name: str = __name__, level: str = "INFO") -> logging.Logger:
    """
    구조화된 로거 인스턴스를 반환합니다.

    Args:
        name: 로거 이름
        level: 기본 로그 레벨 (REGIONAL_FACTS_LOG_LEVEL 환경 변수가 우선)

    Returns:
        설정된 로거 인스턴스
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(StructuredFormatter())

        logger.addHandler(handler)
        logger.setLevel(getattr(logging, os.environ.get(LOG_LEVEL_ENV, level).upper(), logging.INFO))
        logger.propagate = False

    return logger


class StructuredFormatter(logging.Formatter):
    """구조화된 JSON 로그 포매터"""

    # Attributes every LogRecord carries; anything else came in through ``extra``.
    _RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key, value in vars(record).items():
            if key not in self._RESERVED and key not in log_data:
                log_data[key] = value

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)
