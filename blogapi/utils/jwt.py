"""액세스 토큰 발급 및 검증.

Access token issue and verification (PyJWT, HS256 by default).

Payload::

    {"sub": "42", "email": "a@b.com", "exp": 1234567890, "type": "access"}
"""

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from blogapi.config import settings

TOKEN_TYPE_ACCESS: str = "access"


def create_access_token(data: dict[str, Any]) -> str:
    """*data*에 만료 시각과 토큰 유형을 더해 서명합니다.

    Sign *data* plus an ``exp`` claim ``JWT_ACCESS_TOKEN_EXPIRE_MINUTES``
    from now and ``type="access"``.
    """
    claims: dict[str, Any] = dict(data)
    claims["exp"] = datetime.now(timezone.utc) + timedelta(minutes=settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES)
    claims["type"] = TOKEN_TYPE_ACCESS
    return jwt.encode(claims, settings.JWT_SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def decode_token(token: str) -> dict[str, Any]:
    """서명과 만료를 검증하고 페이로드를 반환합니다.

    Raises:
        jwt.ExpiredSignatureError: 만료된 토큰 (Expired token)
        jwt.InvalidTokenError: 서명/형식 오류 (Bad signature or malformed token)
    """
    return jwt.decode(token, settings.JWT_SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
