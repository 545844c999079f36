from typing import Optional

from ...domain.models.user import SessionUser
from ...domain.repositories.session_provider import SessionProvider


class StaticSessionProvider(SessionProvider):
    """Session provider for a user resolved before the core starts"""

    def __init__(self, user_id: Optional[str] = None) -> None:
        self._user = SessionUser(id=user_id) if user_id else None

    def is_authenticated(self) -> bool:
        return self._user is not None

    def get_current_user(self) -> Optional[SessionUser]:
        return self._user

    def sign_in(self, user_id: str) -> None:
        self._user = SessionUser(id=user_id)

    def sign_out(self) -> None:
        self._user = None
