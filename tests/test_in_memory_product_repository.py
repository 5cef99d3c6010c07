"""Tests for the in-memory product repository"""

import threading

import pytest

from catalog.domain import Category, Price, ProductFilter, ProductRepository
from catalog.infrastructure import InMemoryProductRepository
from tests.conftest import make_product


def ids(products):
    return [product.id for product in products]


class TestInitialization:
    """Test cases for repository construction"""

    def test_is_a_product_repository(self):
        assert isinstance(InMemoryProductRepository(), ProductRepository)

    def test_starts_empty(self):
        repository = InMemoryProductRepository()
        assert repository.get_all() == []
        assert len(repository) == 0

    def test_copies_initial_products(self, catalog):
        repository = InMemoryProductRepository(catalog)
        catalog.clear()

        assert len(repository) == 6


class TestGetAll:
    """Test cases for get_all"""

    def test_returns_products_in_insertion_order(self, repository):
        assert ids(repository.get_all()) == ["1", "2", "3", "4", "5", "6"]

    def test_returns_a_copy(self, repository):
        products = repository.get_all()
        products.clear()

        assert len(repository.get_all()) == 6


class TestFindByFilter:
    """Test cases for find_by_filter"""

    def test_empty_filter_returns_everything(self, repository):
        assert ids(repository.find_by_filter(ProductFilter())) == ["1", "2", "3", "4", "5", "6"]

    def test_single_category(self, repository):
        assert ids(repository.find_by_filter(ProductFilter([Category("food")]))) == ["1", "2"]

    def test_multiple_categories(self, repository):
        result = repository.find_by_filter(
            ProductFilter([Category("clothes"), Category("toiletries")])
        )
        assert ids(result) == ["3", "4", "6"]

    def test_price_range(self, repository):
        result = repository.find_by_filter(ProductFilter(min_price=Price(5), max_price=Price(20)))
        assert ids(result) == ["3", "4"]

    def test_min_price_only(self, repository):
        result = repository.find_by_filter(ProductFilter(min_price=Price(50)))
        assert ids(result) == ["5", "6"]

    def test_max_price_only(self, repository):
        result = repository.find_by_filter(ProductFilter(max_price=Price("1.50")))
        assert ids(result) == ["1", "2"]

    def test_category_and_price(self, repository):
        result = repository.find_by_filter(
            ProductFilter([Category("clothes")], Price(10), Price(100))
        )
        assert ids(result) == ["3", "6"]

    def test_stock_dimension(self, repository):
        assert ids(repository.find_by_filter(ProductFilter(has_stock=False))) == ["2", "5"]
        assert ids(
            repository.find_by_filter(ProductFilter([Category("food")], has_stock=True))
        ) == ["1"]

    def test_no_match(self, repository):
        assert repository.find_by_filter(ProductFilter([Category("new")], min_price=Price(100))) == []
        assert repository.find_by_filter(ProductFilter(min_price=Price(1000))) == []

    @pytest.mark.parametrize(
        "product_filter",
        [
            ProductFilter(),
            ProductFilter([Category("offer"), Category("food")]),
            ProductFilter(min_price=Price("1.50"), max_price=Price("89.99")),
            ProductFilter([Category("clothes")], has_stock=True),
            ProductFilter([Category("limited-edition")], max_price=Price(10), has_stock=False),
        ],
    )
    def test_scan_agrees_with_matches(self, repository, catalog, product_filter):
        expected = [product for product in catalog if product_filter.matches(product)]
        assert repository.find_by_filter(product_filter) == expected


class TestGetById:
    """Test cases for get_by_id"""

    def test_returns_product(self, repository):
        assert repository.get_by_id("3").name == "T-Shirt"

    @pytest.mark.parametrize("id", ["999", "", "  ", None])
    def test_missing_or_blank_id_returns_none(self, repository, id):
        assert repository.get_by_id(id) is None


class TestSave:
    """Test cases for save"""

    def test_adds_new_product(self, repository):
        new = make_product("7", "Socks", "4.99", ["clothes"], True)

        assert repository.save(new) is new
        assert ids(repository.get_all())[-1] == "7"
        assert repository.get_by_id("7").name == "Socks"

    def test_replaces_existing_product_in_place(self, repository):
        updated = make_product("2", "Ripe Banana", "1.20", ["food", "offer"], True)
        repository.save(updated)

        products = repository.get_all()
        assert len(products) == 6
        assert ids(products) == ["1", "2", "3", "4", "5", "6"]
        assert repository.get_by_id("2").name == "Ripe Banana"
        assert repository.get_by_id("2").has_stock is True


class TestDelete:
    """Test cases for delete"""

    def test_removes_product(self, repository):
        repository.delete("1")

        assert repository.get_by_id("1") is None
        assert len(repository.get_all()) == 5

    @pytest.mark.parametrize("id", ["999", "", None])
    def test_missing_or_blank_id_is_a_no_op(self, repository, id):
        repository.delete(id)
        assert len(repository.get_all()) == 6


def test_operations_compose(repository):
    repository.delete("5")
    repository.save(make_product("8", "Gift Box", "25", ["limited-edition", "new"], True))
    repository.save(make_product("1", "Apple", "1.10", ["food"], False))

    result = repository.find_by_filter(ProductFilter([Category("food")]))
    assert [(p.id, p.price) for p in result] == [("1", Price("1.10")), ("2", Price("1.50"))]
    assert ids(repository.get_all()) == ["1", "2", "3", "4", "6", "8"]


def test_concurrent_readers_see_consistent_results(repository):
    product_filter = ProductFilter([Category("clothes")])
    results = []

    def read():
        for _ in range(50):
            results.append(ids(repository.find_by_filter(product_filter)))

    threads = [threading.Thread(target=read) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(results) == 200
    assert all(result == ["3", "6"] for result in results)
