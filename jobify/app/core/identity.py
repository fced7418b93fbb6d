"""
Caller identity for a single request.
"""
from dataclasses import dataclass

from jobify.app.core.config import settings


@dataclass(frozen=True)
class Identity:
    user_id: str
    test_user: bool = False

    @classmethod
    def for_user(cls, user_id: str) -> "Identity":
        return cls(user_id=user_id, test_user=user_id == settings.demo_user_id)
