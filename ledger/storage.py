"""
Local persistence for the client ledger.

A ``KeyValueStore`` holds opaque JSON strings under fixed key names; the
``LedgerStore`` keeps one record per user with that user's full transaction
list, newest added first.
"""

import json
import os
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import structlog
from pydantic import TypeAdapter, ValidationError

from constants import transactions_key
from models import TransactionRecord

logger = structlog.get_logger(__name__)

_transaction_list = TypeAdapter(List[TransactionRecord])


class KeyValueStore(ABC):
    """String key/value medium."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        pass


class MemoryKeyValueStore(KeyValueStore):
    """Dictionary backed store, mostly for tests."""

    def __init__(self, items: Optional[Dict[str, str]] = None):
        self._items = dict(items or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class FileKeyValueStore(KeyValueStore):
    """One JSON file per key inside a directory."""

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        if not key or "/" in key or "\\" in key or key.startswith("."):
            raise ValueError(f"Invalid storage key: {key!r}")
        return self.directory / f"{key}.json"

    def get_item(self, key: str) -> Optional[str]:
        try:
            return self._path(key).read_text(encoding="utf-8")
        except FileNotFoundError:
            return None

    def set_item(self, key: str, value: str) -> None:
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=".tmp-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(value)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

    def remove_item(self, key: str) -> None:
        try:
            self._path(key).unlink()
        except FileNotFoundError:
            pass


class LedgerStore:
    """Per-user transaction lists on top of a key/value store."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def load(self, user_id: int) -> List[TransactionRecord]:
        """
        Load a user's transactions in persisted order.

        Missing, unreadable or malformed data reads as an empty ledger.

        Args:
            user_id: Owning user's id

        Returns:
            List of transactions, newest added first
        """
        key = transactions_key(user_id)
        try:
            raw = self.store.get_item(key)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("ledger_unreadable", key=key, error=str(e))
            return []
        if not raw:
            return []

        try:
            return _transaction_list.validate_python(json.loads(raw))
        except (ValueError, ValidationError) as e:
            logger.warning("ledger_corrupt", key=key, error=str(e))
            return []

    def save(self, user_id: int, transactions: Sequence[TransactionRecord]) -> None:
        """Replace the user's whole stored collection."""
        payload = [transaction.to_json() for transaction in transactions]
        self.store.set_item(transactions_key(user_id), json.dumps(payload))

    def add(self, user_id: int, transaction: TransactionRecord) -> None:
        """Prepend a transaction to the user's collection."""
        transactions = self.load(user_id)
        transactions.insert(0, transaction)
        self.save(user_id, transactions)

    def remove(self, user_id: int, transaction_id: int) -> bool:
        """
        Delete one of the user's transactions.

        Only a transaction with a matching id that is also owned by
        ``user_id`` is removed.

        Returns:
            True if a transaction was removed
        """
        transactions = self.load(user_id)
        remaining = [
            transaction
            for transaction in transactions
            if not (transaction.id == transaction_id and transaction.user_id == user_id)
        ]
        if len(remaining) == len(transactions):
            return False
        self.save(user_id, remaining)
        return True

    def clear(self, user_id: int) -> None:
        self.store.remove_item(transactions_key(user_id))
