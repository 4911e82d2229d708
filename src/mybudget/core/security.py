"""Bearer token extraction and JWT verification."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Mapping, Optional

from jose import JWTError, jwt

logger = logging.getLogger(__name__)

BEARER_PREFIX = "bearer "


class TokenAuthority:
    """
    Issues and checks HMAC-signed JWTs carried as bearer tokens.

    Validity means a good signature and an ``exp`` claim in the future.
    The authority says nothing about which resources a subject may reach;
    binding a subject to a client id is the caller's decision.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        header_name: str = "Authorization",
        expire_minutes: int = 60,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._header_name = header_name
        self._expire_minutes = expire_minutes

    @property
    def header_name(self) -> str:
        return self._header_name

    def extract_token(self, headers: Mapping[str, str]) -> Optional[str]:
        """
        Pull the raw token out of the authorization header.

        A missing header, a non-bearer scheme or an empty token all give None.
        """
        value = headers.get(self._header_name)
        if not value or not value.lower().startswith(BEARER_PREFIX):
            return None
        token = value[len(BEARER_PREFIX):].strip()
        return token or None

    def _decode(self, token: str) -> Optional[dict]:
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require_exp": True},
            )
        except JWTError as e:
            logger.debug("Rejected bearer token: %s", e)
            return None

    def is_valid(self, token: Optional[str]) -> bool:
        """Return True if the token is signed with our secret and not expired."""
        if not token:
            return False
        return self._decode(token) is not None

    def get_subject(self, token: Optional[str]) -> Optional[str]:
        """Return the ``sub`` claim of a valid token, else None."""
        if not token:
            return None
        claims = self._decode(token)
        if claims is None:
            return None
        subject = claims.get("sub")
        return str(subject) if subject is not None else None

    def create_token(
        self,
        subject: str,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """Issue a signed token for ``subject``."""
        lifetime = expires_delta if expires_delta is not None else timedelta(minutes=self._expire_minutes)
        expire = datetime.now(timezone.utc) + lifetime
        return jwt.encode(
            {"sub": str(subject), "exp": expire},
            self._secret,
            algorithm=self._algorithm,
        )
