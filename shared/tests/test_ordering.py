from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from functools import cmp_to_key
from uuid import UUID, uuid4

import pytest

from shared.search import DEFAULT_SORT_FIELD, SearchOrder, resolve_ordering


@dataclass
class Item:
    name: str
    created_at: datetime
    id: UUID = field(default_factory=uuid4)


_T0 = datetime(2025, 1, 1, tzinfo=timezone.utc)


def _items() -> list[Item]:
    names = ["banana", "Apple", "cherry", "apple", "Banana"]
    offsets = [3, 1, 4, 0, 2]
    return [Item(name=n, created_at=_T0 + timedelta(seconds=s)) for n, s in zip(names, offsets)]


@pytest.mark.parametrize("field_name", ["name", "id", "createdAt"])
def test_should_resolve_known_fields(field_name):
    ordering = resolve_ordering(field_name, SearchOrder.asc)

    assert ordering.field == field_name
    assert ordering.reverse is False


@pytest.mark.parametrize("field_name", ["", None, "Name", "created_at", "CREATEDAT", "unknown"])
def test_should_fall_back_to_name_for_empty_or_unknown_fields(field_name):
    ordering = resolve_ordering(field_name, SearchOrder.asc)

    assert ordering.field == DEFAULT_SORT_FIELD == "name"


def test_should_keep_direction_on_fallback():
    ordering = resolve_ordering("bogus", SearchOrder.desc)

    assert ordering.field == "name"
    assert ordering.reverse is True


def test_should_compare_names_ordinally():
    # upper-case code points sort before lower-case ones
    ordered = resolve_ordering("name").sort(_items())

    assert [i.name for i in ordered] == ["Apple", "Banana", "apple", "banana", "cherry"]


def test_should_sort_by_created_at():
    ordered = resolve_ordering("createdAt", SearchOrder.desc).sort(_items())

    assert [i.created_at for i in ordered] == sorted((i.created_at for i in _items()), reverse=True)


def test_should_treat_naive_timestamps_as_utc():
    aware = Item(name="a", created_at=_T0 + timedelta(seconds=5))
    naive = Item(name="b", created_at=(_T0 + timedelta(seconds=1)).replace(tzinfo=None))

    ordered = resolve_ordering("createdAt").sort([aware, naive])

    assert ordered == [naive, aware]


def test_should_sort_by_id_string_form():
    items = _items()

    ordered = resolve_ordering("id").sort(items)

    assert [str(i.id) for i in ordered] == sorted(str(i.id) for i in items)


@pytest.mark.parametrize("field_name", ["name", "id", "createdAt"])
def test_should_flip_comparator_sign_for_descending(field_name):
    a, b = _items()[:2]
    asc = resolve_ordering(field_name, SearchOrder.asc)
    desc = resolve_ordering(field_name, SearchOrder.desc)

    assert asc.compare(a, b) == -desc.compare(a, b)
    assert asc.compare(a, a) == 0 == desc.compare(a, a)


@pytest.mark.parametrize("field_name", ["name", "id", "createdAt"])
@pytest.mark.parametrize("order", [SearchOrder.asc, SearchOrder.desc])
def test_should_agree_between_comparator_and_sort(field_name, order):
    items = _items()
    ordering = resolve_ordering(field_name, order)

    assert sorted(items, key=cmp_to_key(ordering.compare)) == ordering.sort(items)


def test_should_accept_plain_string_direction():
    assert resolve_ordering("name", "desc").reverse is True
