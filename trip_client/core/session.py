from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass
class Session:
    """
    Per-request authentication state passed explicitly to services and the platform API.
    """

    token: Optional[str] = None
    user: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_authorization(cls, authorization: Optional[str]) -> "Session":
        if not authorization or not authorization.startswith("Bearer "):
            return cls()
        token = authorization.split(" ", 1)[1].strip()
        return cls(token=token or None)

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)

    @property
    def is_admin(self) -> bool:
        return self.user.get("role") == "admin"

    def client_key(self) -> str:
        """Stable per-user key that does not expose the token itself."""
        if not self.token:
            return "anonymous"
        return hashlib.sha256(self.token.encode()).hexdigest()[:16]

    def clear(self) -> None:
        self.token = None
        self.user = {}
