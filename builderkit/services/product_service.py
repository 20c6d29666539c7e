import logging
from typing import Any
from builderkit.domain.product import Product


### COMMENTS
# ==========================================================
# Warstwa serwisowa (services/product_service.py) — przypadki użycia produktów.
# ==========================================================
# - Tworzenie produktu przez builder.
# - "Zmiana" produktu = nowa instancja przez `to_builder()` (copy-on-write).
# - `demo()` odtwarza przebieg startowy aplikacji: pocoMobile → samsung.

logger = logging.getLogger(__name__)


class ProductService:
    """Serwis przypadków użycia dla produktów."""

    def create(self, product_id: int, product_name: str, price: float) -> Product:
        """
            Tworzy nowy produkt przez builder.

            :param product_id: Identyfikator produktu.
            :param product_name: Nazwa produktu.
            :param price: Cena (int zostanie poszerzony do float).
            :return: Nowy obiekt `Product`.
        """
        product = (
            Product.builder()
            .product_id(product_id)
            .product_name(product_name)
            .price(price)
            .build()
        )
        logger.info("created %s", product)
        return product

    def derive(self, source: Product, **changes: Any) -> Product:
        """
            Tworzy wariant produktu: kopia `source` z nadpisanymi polami.

            - Pola nieobecne w `changes` przechodzą z `source` bez zmian.
            - `source` pozostaje nietknięty.

            :param source: Produkt źródłowy.
            :param changes: Nazwa pola → nowa wartość.
            :raises UnknownFieldError: Gdy nazwa pola nie istnieje.
            :return: Nowy obiekt `Product`.
        """
        builder = source.to_builder()
        for name, value in changes.items():
            builder.set(name, value)
        variant = builder.build()
        logger.info("derived %s from %s", variant, source)
        return variant

    def demo(self) -> tuple[Product, Product]:
        """Zwraca (pocoMobile, samsung); samsung zachowuje cenę pocoMobile."""
        poco_mobile = self.create(12, "pocoMobile", 100)
        samsung = poco_mobile.to_builder().product_id(10).product_name("samsung").build()
        return poco_mobile, samsung
