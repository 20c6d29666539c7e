import pytest
from dataclasses import FrozenInstanceError, fields
from builderkit.domain.product import Product, ProductBuilder, PRODUCT_SCHEMA
from builderkit.domain.errors import UnknownFieldError


def make_poco() -> Product:
    return Product.builder().product_id(12).product_name("pocoMobile").price(100).build()


def test_fresh_builder_builds_zero_values():
    # Act
    product = Product.builder().build()

    # Assert
    assert product.product_id == 0
    assert product.product_name == ""
    assert product.price == 0.0
    assert product == Product()


def test_build_reflects_last_assigned_value():
    product = (
        Product.builder()
        .product_id(1)
        .product_id(2)
        .product_name("a")
        .product_name("b")
        .build()
    )

    assert product.product_id == 2
    assert product.product_name == "b"
    assert product.price == 0.0  # nieustawione → wartość zerowa


def test_setters_return_same_builder():
    builder = Product.builder()

    assert builder.product_id(1) is builder
    assert builder.set("price", 2.5) is builder


def test_int_price_is_widened_to_float():
    product = make_poco()

    assert product.price == 100.0
    assert isinstance(product.price, float)


def test_to_builder_without_changes_yields_equal_product():
    poco = make_poco()

    copy = poco.to_builder().build()

    assert copy == poco
    assert copy is not poco


def test_to_builder_carries_over_unchanged_fields():
    # Arrange
    poco = make_poco()

    # Act
    samsung = poco.to_builder().product_id(10).product_name("samsung").build()

    # Assert
    assert samsung == Product(product_id=10, product_name="samsung", price=100.0)
    assert poco == Product(product_id=12, product_name="pocoMobile", price=100.0)


def test_to_builder_set_single_field():
    poco = make_poco()

    variant = poco.to_builder().set("price", 55.5).build()

    assert variant.price == 55.5
    assert variant.product_id == poco.product_id
    assert variant.product_name == poco.product_name


def test_build_twice_gives_independent_snapshots():
    builder = Product.builder().product_id(1)

    first = builder.build()
    builder.product_id(2)
    second = builder.build()

    assert first.product_id == 1
    assert second.product_id == 2
    assert first is not second


def test_product_is_immutable():
    poco = make_poco()

    with pytest.raises(FrozenInstanceError):
        poco.price = 1.0


def test_set_unknown_field_raises():
    with pytest.raises(UnknownFieldError) as exc:
        Product.builder().set("colour", "red")

    assert exc.value.entity == "Product"
    assert exc.value.field == "colour"


def test_values_returns_copy():
    builder = ProductBuilder().product_id(7)

    values = builder.values()
    values["product_id"] = 99

    assert builder.build().product_id == 7


def test_str_lists_fields_in_declaration_order():
    poco = make_poco()

    assert str(poco) == "Product(product_id=12, product_name=pocoMobile, price=100.0)"
    assert str(poco) == str(poco.to_builder().build())


def test_to_dict_keeps_declaration_order():
    assert list(make_poco().to_dict()) == ["product_id", "product_name", "price"]


def test_all_args_constructor_widens_int_price():
    # Act
    direct = Product(12, "pocoMobile", 100)

    # Assert
    assert isinstance(direct.price, float)
    assert str(direct) == "Product(product_id=12, product_name=pocoMobile, price=100.0)"
    assert str(direct) == str(direct.to_builder().build())


def test_schema_follows_dataclass_fields():
    assert PRODUCT_SCHEMA.names() == tuple(f.name for f in fields(Product))
    assert PRODUCT_SCHEMA.zero_values() == {"product_id": 0, "product_name": "", "price": 0.0}
    assert PRODUCT_SCHEMA.get("price").type is float
