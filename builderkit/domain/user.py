from dataclasses import dataclass
from typing import Any
from builderkit.domain.builder import EntityBuilder
from builderkit.domain.schema import Schema


@dataclass(frozen=True)
class User():
    """Model domenowy użytkownika; niemutowalny. Hasło jest zwykłym polem tekstowym (demo)."""
    id: int = 0
    name: str = ""
    email: str = ""
    password: str = ""

    def __post_init__(self) -> None:
        USER_SCHEMA.normalize(self)

    @staticmethod
    def builder() -> "UserBuilder":
        return UserBuilder()

    def to_builder(self) -> "UserBuilder":
        return UserBuilder(seed=self.to_dict())

    def to_dict(self) -> dict[str, Any]:
        return USER_SCHEMA.values_of(self)

    def __str__(self) -> str:
        return USER_SCHEMA.render(self.to_dict())


USER_SCHEMA = Schema.from_dataclass(User)


class UserBuilder(EntityBuilder[User]):
    schema = USER_SCHEMA
    target = User

    def id(self, value: int) -> "UserBuilder":
        return self.set("id", value)

    def name(self, value: str) -> "UserBuilder":
        return self.set("name", value)

    def email(self, value: str) -> "UserBuilder":
        return self.set("email", value)

    def password(self, value: str) -> "UserBuilder":
        return self.set("password", value)
