"""Tests for the product filter application service"""

from unittest.mock import Mock

import pytest

from core.domain import InvalidRangeException, InvalidValueException
from catalog.domain import Category, Price, ProductFilter, ProductRepository
from catalog.application import FilterProductsQuery, ProductFilterService, SaveProductCommand
from tests.conftest import make_product


def names(products):
    return [product.name for product in products]


class TestFilterProducts:
    """Test cases for filter_products"""

    def test_no_filter_returns_all_with_stock_first(self, service):
        result = service.filter_products(ProductFilter())

        assert names(result) == [
            "Apple",
            "T-Shirt",
            "Shampoo",
            "Designer Jeans",
            "Banana",
            "Limited Watch",
        ]

    def test_category_filter_sorted_by_stock(self, service):
        result = service.filter_products(ProductFilter([Category("food")]))
        assert names(result) == ["Apple", "Banana"]

    def test_stock_first_regardless_of_repository_order(self):
        repository = Mock(spec=ProductRepository)
        repository.find_by_filter.return_value = [
            make_product("a", "A", 1, ["food"], False),
            make_product("b", "B", 2, ["food"], True),
            make_product("c", "C", 3, ["food"], False),
            make_product("d", "D", 4, ["food"], True),
        ]

        result = ProductFilterService(repository).filter_products(ProductFilter())

        assert names(result) == ["B", "D", "A", "C"]

    def test_passes_filter_to_repository(self):
        repository = Mock(spec=ProductRepository)
        repository.find_by_filter.return_value = []
        product_filter = ProductFilter(has_stock=True)

        assert ProductFilterService(repository).filter_products(product_filter) == []
        repository.find_by_filter.assert_called_once_with(product_filter)

    def test_repository_errors_propagate_unchanged(self):
        repository = Mock(spec=ProductRepository)
        error = ConnectionError("storage unreachable")
        repository.find_by_filter.side_effect = error

        with pytest.raises(ConnectionError) as exc_info:
            ProductFilterService(repository).filter_products(ProductFilter())
        assert exc_info.value is error


class TestSearch:
    """Test cases for search with raw query values"""

    def test_converts_raw_values(self, service):
        query = FilterProductsQuery(categories=["clothes"], min_price="10", max_price=100)
        assert names(service.search(query)) == ["T-Shirt", "Designer Jeans"]

    def test_stock_only_query(self, service):
        query = FilterProductsQuery(has_stock=False)
        assert names(service.search(query)) == ["Banana", "Limited Watch"]

    def test_empty_query_returns_everything(self, service):
        assert len(service.search(FilterProductsQuery())) == 6

    def test_invalid_category_is_rejected(self, service):
        with pytest.raises(InvalidValueException):
            service.search(FilterProductsQuery(categories=["electronics"]))

    def test_inverted_range_is_rejected(self, service):
        with pytest.raises(InvalidRangeException):
            service.search(FilterProductsQuery(min_price=20, max_price=10))

    def test_query_to_filter(self):
        product_filter = FilterProductsQuery(["food", "offer"], 1, None, True).to_filter()

        assert product_filter == ProductFilter(
            [Category("food"), Category("offer")], Price(1), None, True
        )


class TestGetProducts:
    """Test cases for get_all_products and get_product_by_id"""

    def test_get_all_products_sorted_by_stock(self, service):
        result = service.get_all_products()

        assert len(result) == 6
        assert [p.has_stock for p in result] == [True, True, True, True, False, False]

    def test_get_all_products_when_empty(self):
        repository = Mock(spec=ProductRepository)
        repository.get_all.return_value = []

        assert ProductFilterService(repository).get_all_products() == []

    def test_get_product_by_id(self, service):
        assert service.get_product_by_id("4").name == "Shampoo"
        assert service.get_product_by_id("404") is None

    def test_get_product_by_id_propagates_errors(self):
        repository = Mock(spec=ProductRepository)
        repository.get_by_id.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            ProductFilterService(repository).get_product_by_id("1")


class TestCommands:
    """Test cases for save_product, create_product and remove_product"""

    def test_save_product_upserts(self, service):
        service.save_product(make_product("2", "Banana", "1.50", ["food"], True))

        result = service.filter_products(ProductFilter([Category("food")]))
        assert [p.has_stock for p in result] == [True, True]

    def test_create_product_from_command(self, service):
        product = service.create_product(
            SaveProductCommand("9", "Toothpaste", "3.20", ["toiletries", "free-shipping"])
        )

        assert product.price == Price("3.20")
        assert product.has_stock is True
        assert service.get_product_by_id("9") is product

    def test_create_product_rejects_invalid_command(self, service):
        with pytest.raises(InvalidValueException):
            service.create_product(SaveProductCommand("9", "", 1, ["food"]))
        assert service.get_product_by_id("9") is None

    def test_create_product_rejects_non_bool_stock(self, service):
        with pytest.raises(InvalidValueException) as exc_info:
            service.create_product(
                SaveProductCommand("9", "Pear", "1.00", ["food"], has_stock="false")
            )

        assert exc_info.value.field_name == "has_stock"
        assert service.get_product_by_id("9") is None

    def test_remove_product(self, service):
        service.remove_product("1")
        service.remove_product("does-not-exist")

        assert service.get_product_by_id("1") is None
        assert len(service.get_all_products()) == 5

    def test_remove_product_propagates_errors(self):
        repository = Mock(spec=ProductRepository)
        repository.delete.side_effect = OSError("disk full")

        with pytest.raises(OSError):
            ProductFilterService(repository).remove_product("1")
