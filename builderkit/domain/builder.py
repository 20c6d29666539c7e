import logging
from typing import Any, Generic, TypeVar
from builderkit.domain.schema import Schema


### COMMENTS
# ==========================================================
# Builder (domain/builder.py) — wspólny mechanizm budowania encji.
# ==========================================================
# Rola:
# - Zbiera wartości pól przez łańcuchowe wywołania (`.set(...)` zwraca self).
# - `build()` tworzy NOWY, niemutowalny obiekt z aktualnego stanu.
#
# Zasady:
# - Builder ma jeden stan ("accumulating"); `build()` go nie zużywa,
#   można wołać wielokrotnie, każda encja jest niezależna.
# - Świeży builder: wszystkie pola = wartości zerowe ze schematu.
# - Builder z `to_builder()`: wszystkie pola skopiowane z encji źródłowej.
# - Brak walidacji i brak pól wymaganych.
# - Builder nie jest thread-safe — współdzielenie między wątkami wymaga
#   zewnętrznej blokady wokół sekwencji `set`.

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EntityBuilder(Generic[T]):
    """
    Bazowy builder dla encji opisanych schematem.

    Podklasa ustawia `schema` oraz `target` (klasę encji) i dodaje typowane
    settery, np. `def price(self, value: float) -> "ProductBuilder"`.

    :param seed: Opcjonalne wartości startowe (np. z istniejącej encji).
    """
    schema: Schema
    target: type[T]

    def __init__(self, seed: dict[str, Any] | None = None) -> None:
        self._values = self.schema.zero_values()
        for name, value in (seed or {}).items():
            self.set(name, value)

    def set(self, name: str, value: Any) -> "EntityBuilder[T]":
        """
            Zapisuje wartość pola, nadpisując poprzednią.

            :param name: Nazwa pola ze schematu.
            :param value: Nowa wartość (bez walidacji).
            :raises UnknownFieldError: Gdy pola nie ma w schemacie.
            :return: Ten sam builder (do łańcuchowania).
        """
        self._values[name] = self.schema.coerce(name, value)
        return self

    def values(self) -> dict[str, Any]:
        """Kopia aktualnie zebranych wartości."""
        return dict(self._values)

    def build(self) -> T:
        """
            Tworzy nową encję z aktualnego stanu buildera.

            Builder pozostaje używalny — kolejne `set` i `build` dają
            kolejne, niezależne encje.
        """
        logger.debug("building %s from %s", self.schema.entity, self._values)
        return self.target(**self._values)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.schema.render(self._values)})"
