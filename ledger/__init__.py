"""
Client-side ledger: local store, session, remote mirror.
"""

from typing import Optional

from config import get_config
from ledger.api_client import FinanceApiClient
from ledger.mirror import NullMirror, RemoteMirror, log_mirror_failure
from ledger.service import LedgerService
from ledger.session import Session
from ledger.storage import FileKeyValueStore, KeyValueStore, LedgerStore, MemoryKeyValueStore


def create_ledger(directory: Optional[str] = None, offline: bool = False) -> LedgerService:
    """
    Build a ledger wired from configuration.

    Args:
        directory: Storage directory, defaults to the LEDGER_DIR setting
        offline: Skip the remote mirror

    Returns:
        LedgerService sharing one file store between ledger and session
    """
    config = get_config()
    store = FileKeyValueStore(directory or config.ledger_dir)
    mirror = None
    if not offline:
        mirror = RemoteMirror(FinanceApiClient(config.api_base_url, timeout=config.mirror_timeout))
    return LedgerService(LedgerStore(store), Session(store), mirror=mirror)


__all__ = [
    "FileKeyValueStore",
    "FinanceApiClient",
    "KeyValueStore",
    "LedgerService",
    "LedgerStore",
    "MemoryKeyValueStore",
    "NullMirror",
    "RemoteMirror",
    "Session",
    "create_ledger",
    "log_mirror_failure",
]
