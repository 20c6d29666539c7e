from builderkit.ports.user_provider import UserProvider
from builderkit.domain.user import User


class DemoUserProvider(UserProvider):
    """Adapter demo: za każdym razem buduje nowego użytkownika ze stałymi wartościami."""

    def current_user(self) -> User:
        user_id = 0
        name, email, password = "tarun", "tarun@gmail.com", "0000"
        return (
            User.builder()
            .id(user_id)
            .name(name)
            .email(email)
            .password(password)
            .build()
        )
