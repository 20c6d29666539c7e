from typing import Protocol
from builderkit.domain.user import User


class UserProvider(Protocol):
    """Port dostarczający "bieżącego" użytkownika."""
    def current_user(self) -> User:
        pass
