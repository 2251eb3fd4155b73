"""Greeting catalog: size, ordering, bounds and construction rules."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from greetql.domain import Catalog, GreetingRecord, default_catalog
from greetql.domain.catalog import DEFAULT_FLOWERS, DEFAULT_GREETINGS


@pytest.mark.os_agnostic
def test_default_catalog_holds_ten_greetings() -> None:
    """The bundled catalog has exactly ten entries."""
    assert len(default_catalog()) == 10


@pytest.mark.os_agnostic
def test_default_catalog_ids_are_positions_plus_one() -> None:
    """Identifiers run 1..10 in catalog order."""
    assert [record.id for record in default_catalog()] == list(range(1, 11))


@pytest.mark.os_agnostic
def test_default_catalog_pairs_texts_with_flowers() -> None:
    """Each record carries the text and decoration at the same position."""
    catalog = default_catalog()

    record = catalog.get(1)

    assert record == GreetingRecord(id=1, text=DEFAULT_GREETINGS[0], decoration=DEFAULT_FLOWERS[0])


@pytest.mark.os_agnostic
def test_default_catalog_first_and_last_entries() -> None:
    """Boundary records are the first and tenth greetings."""
    catalog = default_catalog()

    assert catalog.get(1).text.startswith("С 8 Марта! Пусть каждый день")  # type: ignore[union-attr]
    assert catalog.get(10).decoration == "🌸🌼🌻"  # type: ignore[union-attr]


@pytest.mark.os_agnostic
@pytest.mark.parametrize("greeting_id", [0, 11, -1, 1_000_000])
def test_catalog_get_returns_none_outside_range(greeting_id: int) -> None:
    """Out-of-range identifiers have no record."""
    assert default_catalog().get(greeting_id) is None


@pytest.mark.os_agnostic
def test_default_catalog_is_fresh_each_call() -> None:
    """Two calls never share an instance."""
    assert default_catalog() is not default_catalog()


@pytest.mark.os_agnostic
def test_catalog_from_pairs_without_decorations_leaves_them_empty() -> None:
    """Missing decorations default to empty strings."""
    catalog = Catalog.from_pairs(["one", "two"])

    assert [record.decoration for record in catalog] == ["", ""]


@pytest.mark.os_agnostic
def test_catalog_from_pairs_rejects_length_mismatch() -> None:
    """Texts and decorations must line up."""
    with pytest.raises(ValueError, match="2 greetings but 1 decorations"):
        Catalog.from_pairs(["one", "two"], ["x"])


@pytest.mark.os_agnostic
def test_catalog_rejects_empty_records() -> None:
    """A catalog needs at least one greeting."""
    with pytest.raises(ValueError, match="at least one"):
        Catalog([])


@pytest.mark.os_agnostic
def test_catalog_rejects_non_sequential_ids() -> None:
    """Record ids must equal their 1-based position."""
    with pytest.raises(ValueError, match="position 1 has id 2"):
        Catalog([GreetingRecord(id=2, text="x")])


@pytest.mark.os_agnostic
def test_catalog_repr_shows_size() -> None:
    """repr stays short."""
    assert repr(default_catalog()) == "Catalog(size=10)"


@pytest.mark.os_agnostic
def test_greeting_record_is_immutable() -> None:
    """Records are frozen."""
    record = GreetingRecord(id=1, text="x")

    with pytest.raises(AttributeError):
        record.text = "y"  # type: ignore[misc]


@pytest.mark.os_agnostic
@given(greeting_id=st.integers())
def test_catalog_get_matches_range_for_any_integer(greeting_id: int) -> None:
    """A record exists exactly for identifiers in 1..10."""
    record = default_catalog().get(greeting_id)

    if 1 <= greeting_id <= 10:
        assert record is not None
        assert record.id == greeting_id
    else:
        assert record is None
