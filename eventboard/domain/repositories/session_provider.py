from abc import ABC, abstractmethod
from typing import Optional

from ..models.user import SessionUser


class SessionProvider(ABC):
    """Interface to the already-resolved authentication session"""

    @abstractmethod
    def is_authenticated(self) -> bool:
        pass

    @abstractmethod
    def get_current_user(self) -> Optional[SessionUser]:
        """Return the signed-in user, or None when signed out"""
        pass
