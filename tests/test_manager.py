"""Tests for entity managers."""

import pytest

from design_drills.manager import EntityManager, Manager
from design_drills.models import Book, User


def test_manager_is_abstract() -> None:
    """Test the manager contract cannot be instantiated."""
    with pytest.raises(TypeError):
        Manager()


def test_add_returns_entity() -> None:
    """Test add returns the same entity."""
    manager: EntityManager[Book] = EntityManager("book")
    book = Book("Dune", "978-0")
    assert manager.add(book) is book


def test_list_all_keeps_insertion_order() -> None:
    """Test listing returns every added entity in order."""
    manager: EntityManager[Book] = EntityManager("book")
    books = [Book("B", "2"), Book("A", "1"), Book("B", "3")]
    for book in books:
        manager.add(book)
    assert manager.list_all() == tuple(books)
    assert len(manager) == 3
    assert list(manager) == books


def test_list_all_is_a_snapshot() -> None:
    """Test the listing cannot mutate the manager."""
    manager: EntityManager[Book] = EntityManager("book")
    manager.add(Book("Dune", "978-0"))
    listed = manager.list_all()
    manager.add(Book("Emma", "978-1"))
    assert len(listed) == 1
    assert len(manager.list_all()) == 2


def test_get_returns_first_match() -> None:
    """Test get returns the first entity with the name."""
    manager: EntityManager[User] = EntityManager("user")
    first = manager.add(User("Ann", 30))
    manager.add(User("Ann", 40))
    assert manager.get("Ann") is first


def test_get_is_case_sensitive() -> None:
    """Test name matching is exact."""
    manager: EntityManager[User] = EntityManager("user")
    manager.add(User("Ann", 30))
    assert manager.get("ann") is None


def test_unknown_name_is_absent() -> None:
    """Test get and remove on unknown names return None."""
    manager: EntityManager[Book] = EntityManager("book")
    manager.add(Book("Dune", "978-0"))
    assert manager.get("Emma") is None
    assert manager.remove("Emma") is None
    assert len(manager) == 1


def test_remove_drops_all_matches() -> None:
    """Test removing a name drops every entity with that name."""
    manager: EntityManager[Book] = EntityManager("book")
    first = manager.add(Book("Dune", "1"))
    other = manager.add(Book("Emma", "2"))
    manager.add(Book("Dune", "3"))

    assert manager.remove("Dune") is first
    assert manager.get("Dune") is None
    assert manager.list_all() == (other,)


def test_dune_scenario() -> None:
    """Test add, list and remove of a single book."""
    manager: EntityManager[Book] = EntityManager("book")
    book = manager.add(Book(name="Dune", isbn="978-0"))

    listed = manager.list_all()
    assert len(listed) == 1
    assert "Dune" in listed[0].describe()
    assert "978-0" in listed[0].describe()

    assert manager.remove("Dune") is book
    assert manager.list_all() == ()
