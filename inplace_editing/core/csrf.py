"""Request-forgery protection for in-place edit submissions."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from fastapi import HTTPException, Request, status
from jose import JWTError, jwt

from inplace_editing.core.config import SecuritySettings

logger = logging.getLogger(__name__)

TOKEN_FIELD = "authenticity_token"
TOKEN_HEADER = "X-CSRF-Token"
_PURPOSE = "in_place_edit"


class ForgeryProtection:
    """Issues and checks signed authenticity tokens.

    Tokens are short-lived JWTs signed with the application secret; when
    protection is disabled every request passes and no token is emitted.
    """

    def __init__(self, settings: SecuritySettings) -> None:
        self._settings = settings

    @property
    def is_active(self) -> bool:
        return self._settings.csrf_enabled

    def form_authenticity_token(self) -> str:
        expire = datetime.now(timezone.utc) + timedelta(
            minutes=self._settings.csrf_token_expire_minutes
        )
        payload = {"purpose": _PURPOSE, "exp": expire}
        return jwt.encode(payload, self._settings.secret_key, algorithm=self._settings.algorithm)

    def verify_token(self, token: str | None) -> bool:
        if not token:
            return False
        try:
            payload = jwt.decode(token, self._settings.secret_key, algorithms=[self._settings.algorithm])
        except JWTError as exc:
            logger.warning("Rejected authenticity token: %s", exc)
            return False
        return payload.get("purpose") == _PURPOSE

    async def verify_request(self, request: Request) -> None:
        """FastAPI dependency guarding generated edit routes."""
        if not self.is_active:
            return
        form = await request.form()
        token = form.get(TOKEN_FIELD) or request.headers.get(TOKEN_HEADER)
        if not isinstance(token, str) or not self.verify_token(token):
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid authenticity token")


__all__ = ["ForgeryProtection", "TOKEN_FIELD", "TOKEN_HEADER"]
