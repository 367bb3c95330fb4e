from concurrent.futures import ThreadPoolExecutor
from decimal import Decimal

import pytest

from id_generators import CounterIdGenerator, TimestampIdGenerator
from utils import format_currency, normalize_amount, to_decimal, validate_iso_date


def test_normalize_amount():
    assert normalize_amount(1000) == "1000.00"
    assert normalize_amount(0.1) == "0.10"
    assert normalize_amount("12.345") == "12.35"
    assert normalize_amount(Decimal("7")) == "7.00"


@pytest.mark.parametrize("value", [0, -1, "0.001", "abc", "NaN", True])
def test_normalize_amount_rejects(value):
    with pytest.raises(ValueError):
        normalize_amount(value)


def test_normalize_amount_maximum():
    assert normalize_amount("99999999.99") == "99999999.99"
    with pytest.raises(ValueError, match="maximum"):
        normalize_amount("100000000")


def test_to_decimal_float_uses_repr():
    assert to_decimal(0.1) == Decimal("0.1")


def test_validate_iso_date():
    assert validate_iso_date("2024-02-29") == "2024-02-29"
    for bad in ["", "2024-2-1", "20240201", "2023-02-29"]:
        with pytest.raises(ValueError):
            validate_iso_date(bad)


def test_format_currency():
    assert format_currency(Decimal("1234.5")) == "$1,234.50"
    assert format_currency("-10") == "-$10.00"
    assert format_currency(0) == "$0.00"


def test_counter_ids():
    ids = CounterIdGenerator(start=5)
    assert [ids.next_id() for _ in range(3)] == [5, 6, 7]
    with pytest.raises(ValueError):
        CounterIdGenerator(start=0)


def test_timestamp_ids_strictly_increase():
    ids = TimestampIdGenerator(clock=lambda: 1700000000.0)
    assert [ids.next_id() for _ in range(3)] == [1700000000000, 1700000000001, 1700000000002]


def test_counter_ids_unique_across_threads():
    ids = CounterIdGenerator()
    with ThreadPoolExecutor(max_workers=8) as pool:
        issued = list(pool.map(lambda _: ids.next_id(), range(2000)))
    assert sorted(issued) == list(range(1, 2001))
