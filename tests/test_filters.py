import pytest
from pydantic import ValidationError

from filters import TransactionFilter, apply_filters


def test_filter_scenario(scenario_transactions):
    result = apply_filters(
        scenario_transactions, TransactionFilter(type="expense", from_date="2024-02-01")
    )
    assert [t.id for t in result] == [3]


def test_date_range_is_inclusive(scenario_transactions):
    result = apply_filters(
        scenario_transactions, TransactionFilter(from_date="2024-01-15", to_date="2024-01-20")
    )
    assert [t.id for t in result] == [1, 2]


def test_category_is_exact_match(scenario_transactions):
    assert [t.id for t in apply_filters(scenario_transactions, TransactionFilter(category="Food"))] == [2]
    assert apply_filters(scenario_transactions, TransactionFilter(category="food")) == []


def test_blank_values_mean_no_constraint(scenario_transactions):
    blank = TransactionFilter(type="", category="", fromDate="", toDate="")
    assert blank.is_empty
    assert apply_filters(scenario_transactions, blank) == scenario_transactions
    assert apply_filters(scenario_transactions, None) == scenario_transactions


def test_filter_is_idempotent(scenario_transactions):
    transaction_filter = TransactionFilter(type="expense", to_date="2024-01-31")
    once = apply_filters(scenario_transactions, transaction_filter)
    twice = apply_filters(once, transaction_filter)
    assert once == twice
    assert [t.id for t in once] == [2]


def test_filter_does_not_mutate_input(scenario_transactions):
    original = list(scenario_transactions)
    apply_filters(scenario_transactions, TransactionFilter(type="income"))
    assert scenario_transactions == original


def test_invalid_filter_values_rejected():
    with pytest.raises(ValidationError):
        TransactionFilter(type="transfer")
    with pytest.raises(ValidationError):
        TransactionFilter(from_date="01/02/2024")
