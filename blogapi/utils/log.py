"""로깅 설정 모듈.

Process-wide logging configuration from settings.
"""

import logging

from blogapi.config import settings

_configured: bool = False


def configure_logging() -> None:
    """설정값으로 루트 로거를 한 번만 구성합니다.

    Configure the root logger once from ``settings.LOG_LEVEL``.
    """
    global _configured
    if _configured:
        return

    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    _configured = True
