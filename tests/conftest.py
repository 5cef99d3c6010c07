"""Pytest configuration and fixtures for the catalog filtering tests."""

import os

# 测试环境配置需要在导入项目模块之前设置
os.environ.setdefault("REFACTORSHOP_ENV", "testing")

import pytest

from catalog.domain import Category, Price, Product
from catalog.application import ProductFilterService
from catalog.infrastructure import InMemoryProductRepository


def make_product(id, name, price, categories, has_stock=True):
    """Build a product from raw values."""
    return Product(
        id=id,
        name=name,
        price=Price(price),
        categories=[Category(c) for c in categories],
        has_stock=has_stock,
    )


@pytest.fixture
def apple():
    return make_product("1", "Apple", "0.99", ["food", "free-shipping"], True)


@pytest.fixture
def banana():
    return make_product("2", "Banana", "1.50", ["food"], False)


@pytest.fixture
def shirt():
    return make_product("3", "T-Shirt", "15.99", ["clothes", "new"], True)


@pytest.fixture
def catalog(apple, banana, shirt):
    """Six products covering every category, price band and stock state."""
    return [
        apple,
        banana,
        shirt,
        make_product("4", "Shampoo", "8.50", ["toiletries", "offer"], True),
        make_product("5", "Limited Watch", "299.99", ["limited-edition"], False),
        make_product("6", "Designer Jeans", "89.99", ["clothes", "offer"], True),
    ]


@pytest.fixture
def repository(catalog):
    return InMemoryProductRepository(catalog)


@pytest.fixture
def service(repository):
    return ProductFilterService(repository)
