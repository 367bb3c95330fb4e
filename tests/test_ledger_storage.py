import json

from constants import transactions_key
from ledger.storage import FileKeyValueStore, LedgerStore
from tests.conftest import make_transaction


def test_load_missing_user_is_empty(ledger_store):
    assert ledger_store.load(42) == []


def test_add_prepends_and_load_roundtrip(ledger_store):
    first = make_transaction(1, "income", "1000", "2024-01-15")
    second = make_transaction(2, "expense", "12.5", "2024-01-16")
    ledger_store.add(1, first)
    ledger_store.add(1, second)

    loaded = ledger_store.load(1)
    assert [t.id for t in loaded] == [2, 1]
    assert loaded[0] == second
    assert loaded[0].amount == "12.50"


def test_remove_excludes_transaction(ledger_store, scenario_transactions):
    ledger_store.save(1, scenario_transactions)
    assert ledger_store.remove(1, 2) is True
    assert [t.id for t in ledger_store.load(1)] == [1, 3]
    assert ledger_store.remove(1, 2) is False


def test_remove_checks_ownership(ledger_store):
    foreign = make_transaction(9, "expense", "5", "2024-01-01", user_id=2)
    ledger_store.save(1, [foreign])
    assert ledger_store.remove(1, 9) is False
    assert ledger_store.load(1) == [foreign]


def test_users_are_partitioned(ledger_store):
    ledger_store.add(1, make_transaction(1, "income", "10", "2024-01-01", user_id=1))
    ledger_store.add(2, make_transaction(2, "income", "20", "2024-01-01", user_id=2))
    assert [t.id for t in ledger_store.load(1)] == [1]
    assert [t.id for t in ledger_store.load(2)] == [2]


def test_save_replaces_collection(ledger_store, scenario_transactions):
    ledger_store.save(1, scenario_transactions)
    ledger_store.save(1, scenario_transactions[:1])
    assert [t.id for t in ledger_store.load(1)] == [1]


def test_corrupt_data_reads_as_empty(kv_store, ledger_store):
    kv_store.set_item(transactions_key(1), "{not json")
    assert ledger_store.load(1) == []

    kv_store.set_item(transactions_key(1), json.dumps({"id": 1}))
    assert ledger_store.load(1) == []

    kv_store.set_item(transactions_key(1), json.dumps([{"id": 1, "amount": "-5"}]))
    assert ledger_store.load(1) == []


def test_persisted_blob_uses_camel_case(kv_store, ledger_store):
    ledger_store.add(7, make_transaction(1, "expense", "3", "2024-05-05", user_id=7))
    blob = json.loads(kv_store.get_item("financeApp_transactions_7"))
    assert blob[0]["userId"] == 7
    assert blob[0]["amount"] == "3.00"
    assert "createdAt" in blob[0]


def test_clear_drops_record(ledger_store, scenario_transactions):
    ledger_store.save(1, scenario_transactions)
    ledger_store.clear(1)
    assert ledger_store.load(1) == []


def test_file_store_persists_between_instances(tmp_path, scenario_transactions):
    LedgerStore(FileKeyValueStore(tmp_path)).save(1, scenario_transactions)

    reopened = LedgerStore(FileKeyValueStore(tmp_path))
    assert reopened.load(1) == scenario_transactions
    assert (tmp_path / "financeApp_transactions_1.json").exists()


def test_file_store_corrupt_file(tmp_path):
    store = FileKeyValueStore(tmp_path)
    (tmp_path / "financeApp_transactions_1.json").write_text("\x00garbage", encoding="utf-8")
    assert LedgerStore(store).load(1) == []


def test_file_store_remove_missing_key(tmp_path):
    store = FileKeyValueStore(tmp_path)
    store.remove_item("financeApp_currentUser")
    assert store.get_item("financeApp_currentUser") is None
