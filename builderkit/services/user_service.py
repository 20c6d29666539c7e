import logging
from builderkit.ports.user_provider import UserProvider
from builderkit.domain.user import User


logger = logging.getLogger(__name__)


class UserService:
    """
    Serwis przypadków użycia dla użytkownika.

    :param provider: Implementacja portu UserProvider.
    """
    def __init__(self, provider: UserProvider) -> None:
        self.provider = provider

    def get_current_user(self) -> User:
        """
            Zwraca bieżącego użytkownika.

            - Bezstanowy: każde wywołanie deleguje do providera i zwraca
            nowy, niemutowalny obiekt `User`.

            :return: Obiekt `User`.
        """
        user = self.provider.current_user()
        logger.debug("current user resolved: id=%s", user.id)
        return user
