from __future__ import annotations

import pytest

from fakes import InMemoryCartRepository, InMemoryProductRepository
from storefront.application.use_cases.cart.add_to_cart import AddToCartUseCase
from storefront.application.use_cases.cart.get_cart import GetCartUseCase
from storefront.application.use_cases.products.create_product import CreateProductUseCase
from storefront.application.use_cases.products.list_products import ListProductsUseCase
from storefront.domain import InvariantViolation, Product


@pytest.fixture()
def products() -> InMemoryProductRepository:
    return InMemoryProductRepository(
        [Product(id=7, name="Mug", price=9.5), Product(id=8, name="Shirt", price=20.0)]
    )


@pytest.fixture()
def cart() -> InMemoryCartRepository:
    return InMemoryCartRepository()


def test_repeat_adds_accumulate_into_one_row(cart: InMemoryCartRepository) -> None:
    add = AddToCartUseCase(cart=cart)

    add.execute(1, 7, 2)
    item = add.execute(1, 7, 3)

    assert item.quantity == 5
    assert len(cart.list_for_user(1)) == 1


def test_carts_are_per_user(cart: InMemoryCartRepository) -> None:
    add = AddToCartUseCase(cart=cart)

    add.execute(1, 7, 1)
    add.execute(2, 7, 4)

    assert [i.quantity for i in cart.list_for_user(1)] == [1]
    assert [i.quantity for i in cart.list_for_user(2)] == [4]


def test_negative_quantity_is_rejected(cart: InMemoryCartRepository) -> None:
    with pytest.raises(InvariantViolation):
        AddToCartUseCase(cart=cart).execute(1, 7, -1)
    assert cart.rows == {}


def test_get_cart_resolves_products(
    cart: InMemoryCartRepository, products: InMemoryProductRepository
) -> None:
    AddToCartUseCase(cart=cart).execute(1, 7, 2)

    lines = GetCartUseCase(cart=cart, products=products).execute(1)

    assert [line.to_dict() for line in lines] == [
        {"id": 7, "name": "Mug", "price": 9.5, "quantity": 2}
    ]


def test_get_cart_skips_missing_products(
    cart: InMemoryCartRepository, products: InMemoryProductRepository
) -> None:
    add = AddToCartUseCase(cart=cart)
    add.execute(1, 999, 1)
    add.execute(1, 8, 1)

    lines = GetCartUseCase(cart=cart, products=products).execute(1)

    assert [line.product.id for line in lines] == [8]


def test_empty_cart(cart: InMemoryCartRepository, products: InMemoryProductRepository) -> None:
    assert GetCartUseCase(cart=cart, products=products).execute(1) == []


def test_create_and_list_products() -> None:
    repo = InMemoryProductRepository()

    created = CreateProductUseCase(products=repo).execute("Lamp", 12.0, created_by=1)

    assert ListProductsUseCase(products=repo).execute() == [created]
