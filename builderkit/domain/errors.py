### COMMENTS
# ============================================
# Konwencja użycia błędów domenowych w projekcie
# ============================================
# - Buildery (domain):
#     * są "totalne" — set/build/to_builder nie rzucają dla poprawnych nazw pól
#     * jedyny wyjątek: nieznana nazwa pola w `set(name, value)` → UnknownFieldError
#
# - Konfiguracja:
#     * błędne wartości zmiennych środowiskowych → ConfigError
#
# - UI (CLI, HTTP):
#     * łapie DomainError i wyświetla przyjazny komunikat
#     * wszystko inne traktuje jako błąd techniczny (propaguje dalej)


class DomainError(Exception):
    """Bazowa klasa dla błędów domenowych.
    Umożliwia odróżnienie błędów domeny od błędów technicznych (I/O, sieć).
    Nie powinna być rzucana bezpośrednio — używaj klas pochodnych.
    """


class UnknownFieldError(DomainError):
    """Rzucany, gdy builder dostaje nazwę pola spoza schematu encji.
    Typowane settery (np. `ProductBuilder.price`) nigdy go nie zgłaszają;
    dotyczy tylko dynamicznego `set(name, value)` i `ProductService.derive`.
    """
    def __init__(self, entity: str, field: str):
        self.entity = entity
        self.field = field
        super().__init__(self.__str__())
    def __str__(self):
        return f"Encja {self.entity} nie ma pola '{self.field}'."


class ConfigError(DomainError):
    """Rzucany, gdy wartość konfiguracji (zmienna środowiskowa) jest niepoprawna."""
    def __init__(self, key: str, message: str):
        self.key = key
        self.message = message
        super().__init__(self.__str__())
    def __str__(self):
        return f"Błąd konfiguracji '{self.key}': {self.message}"
