from dataclasses import dataclass, fields
from typing import Any
from builderkit.domain.errors import UnknownFieldError


### COMMENTS
# ==========================================================
# Schemat encji (domain/schema.py) — opis pól odczytany z dataclass.
# ==========================================================
# - Jedynym miejscem deklaracji pól jest ciało dataclass encji
#   (nazwa, typ, wartość domyślna = wartość zerowa).
# - `Schema.from_dataclass(Product)` czyta to przez `dataclasses.fields`,
#   więc builder, `__str__` i `to_dict()` nie powielają listy pól.
# - Wartości zerowe: int → 0, float → 0.0, str → "".
# - Jedyna "koercja": int przypisany do pola float staje się floatem
#   (jak poszerzanie typu int → double). Żadnej walidacji.


@dataclass(frozen=True)
class FieldSpec:
    """Opis pojedynczego pola encji."""
    name: str
    type: type
    zero: Any


@dataclass(frozen=True)
class Schema:
    """Uporządkowany zestaw pól encji o nazwie `entity`."""
    entity: str
    fields: tuple[FieldSpec, ...]

    @classmethod
    def from_dataclass(cls, entity_cls: type) -> "Schema":
        """
            Buduje schemat z pól dataclass, w kolejności deklaracji.

            Każde pole musi mieć wartość domyślną — to jego wartość zerowa.
        """
        specs = tuple(
            FieldSpec(name=f.name, type=f.type, zero=f.default)
            for f in fields(entity_cls)
        )
        return cls(entity=entity_cls.__name__, fields=specs)

    def names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def zero_values(self) -> dict[str, Any]:
        """Zwraca świeży słownik nazwa → wartość zerowa (w kolejności deklaracji)."""
        return {f.name: f.zero for f in self.fields}

    def get(self, name: str) -> FieldSpec:
        """
            Zwraca opis pola o danej nazwie.

            :raises UnknownFieldError: Gdy pola nie ma w schemacie.
        """
        for f in self.fields:
            if f.name == name:
                return f
        raise UnknownFieldError(self.entity, name)

    def coerce(self, name: str, value: Any) -> Any:
        """Poszerza int do float dla pól typu float; resztę zwraca bez zmian."""
        spec = self.get(name)
        if spec.type is float and isinstance(value, int) and not isinstance(value, bool):
            return float(value)
        return value

    def values_of(self, entity: Any) -> dict[str, Any]:
        """Odczytuje wartości pól encji po nazwie, w kolejności deklaracji."""
        return {name: getattr(entity, name) for name in self.names()}

    def normalize(self, entity: Any) -> None:
        """Stosuje `coerce` do pól zamrożonej encji (wołane z `__post_init__`)."""
        for name, value in self.values_of(entity).items():
            object.__setattr__(entity, name, self.coerce(name, value))

    def render(self, values: dict[str, Any]) -> str:
        """Renderuje `Encja(a=1, b=x)` w kolejności deklaracji."""
        pairs = ", ".join(f"{name}={values[name]}" for name in self.names())
        return f"{self.entity}({pairs})"
