from dataclasses import dataclass
from typing import Any
from builderkit.domain.builder import EntityBuilder
from builderkit.domain.schema import Schema


@dataclass(frozen=True)
class Product():
    """
    Model domenowy produktu; niemutowalny; każda "zmiana" to nowa instancja
    przez `to_builder()`.
    """
    product_id: int = 0
    product_name: str = ""
    price: float = 0.0

    def __post_init__(self) -> None:
        PRODUCT_SCHEMA.normalize(self)

    @staticmethod
    def builder() -> "ProductBuilder":
        """Świeży builder — wszystkie pola z wartościami zerowymi."""
        return ProductBuilder()

    def to_builder(self) -> "ProductBuilder":
        """Builder wypełniony bieżącymi wartościami tego produktu."""
        return ProductBuilder(seed=self.to_dict())

    def to_dict(self) -> dict[str, Any]:
        return PRODUCT_SCHEMA.values_of(self)

    def __str__(self) -> str:
        return PRODUCT_SCHEMA.render(self.to_dict())


PRODUCT_SCHEMA = Schema.from_dataclass(Product)


class ProductBuilder(EntityBuilder[Product]):
    schema = PRODUCT_SCHEMA
    target = Product

    def product_id(self, value: int) -> "ProductBuilder":
        return self.set("product_id", value)

    def product_name(self, value: str) -> "ProductBuilder":
        return self.set("product_name", value)

    def price(self, value: float) -> "ProductBuilder":
        return self.set("price", value)



### COMMENTS
# ======================================
# 1️⃣ Dlaczego builder, skoro dataclass ma __init__?
# ======================================
# Dataclass daje konstruktor "wszystkie argumenty" (Product(12, "x", 100) → price=100.0,
# `__post_init__` poszerza int do float tak samo jak builder)
# i — dzięki wartościom domyślnym — konstruktor "bez argumentów" (Product()).
# Builder dodaje budowanie krok po kroku:
#   Product.builder().product_id(12).product_name("pocoMobile").price(100).build()
#
# ======================================
# 2️⃣ to_builder() — kopia z modyfikacją
# ======================================
#   samsung = poco.to_builder().product_id(10).product_name("samsung").build()
# `price` nie był ustawiony → przechodzi z `poco` bez zmian.
# `poco` zostaje nietknięty (frozen=True), więc inni trzymający referencję
# do `poco` nie zobaczą zmiany.
#
# ======================================
# 3️⃣ __str__ vs __repr__
# ======================================
# __str__ → Product(product_id=12, product_name=pocoMobile, price=100.0)
# __repr__ zostaje z dataclass (z cudzysłowami przy stringach) — do debugowania.
