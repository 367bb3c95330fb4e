"""
Client ledger: local commit plus optimistic remote mirroring, and the
filtered/aggregated views the dashboard renders.
"""

from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Union

import structlog
from pydantic import ValidationError

import analytics
from constants import TOP_CATEGORY_LIMIT
from exceptions import InvalidInputError, first_error_message
from filters import TransactionFilter, apply_filters
from id_generators import IdGenerator, TimestampIdGenerator
from ledger.mirror import NullMirror, RemoteMirror
from ledger.session import Session
from ledger.storage import LedgerStore
from models import TransactionCreate, TransactionRecord

logger = structlog.get_logger(__name__)


class LedgerService:
    """
    The current user's ledger.

    Writes commit to the local store first; the local store is what the UI
    shows. The mirror is then handed the same write and its outcome never
    reaches the caller.

    The in-memory view belongs to the user it was loaded for. Any access after
    the session changes user reloads it from the store, and a logged out
    session sees an empty ledger.
    """

    def __init__(
        self,
        store: LedgerStore,
        session: Session,
        mirror: Optional[Union[RemoteMirror, NullMirror]] = None,
        id_generator: Optional[IdGenerator] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.store = store
        self.session = session
        self.mirror = mirror or NullMirror()
        self.id_generator = id_generator or TimestampIdGenerator()
        self.clock = clock or datetime.now

        self._loaded_for: Optional[int] = None
        self._transactions: List[TransactionRecord] = []
        self._visible: List[TransactionRecord] = []
        self._filter: Optional[TransactionFilter] = None

    def _reset(self, user_id: Optional[int]) -> None:
        self._transactions = self.store.load(user_id) if user_id is not None else []
        self._loaded_for = user_id
        self._filter = None
        self._visible = list(self._transactions)

    def _sync(self) -> None:
        user = self.session.current_user
        user_id = user.id if user is not None else None
        if user_id != self._loaded_for:
            self._reset(user_id)

    def _refresh(self, user_id: int) -> None:
        # Rebuild from the store so the view matches what was persisted
        self._transactions = self.store.load(user_id)
        self._visible = apply_filters(self._transactions, self._filter)

    @property
    def transactions(self) -> List[TransactionRecord]:
        """Full loaded collection, newest added first."""
        self._sync()
        return list(self._transactions)

    @property
    def visible(self) -> List[TransactionRecord]:
        """Collection after the active filter."""
        self._sync()
        return list(self._visible)

    @property
    def active_filter(self) -> Optional[TransactionFilter]:
        self._sync()
        return self._filter

    @property
    def categories(self) -> List[str]:
        self._sync()
        return analytics.distinct_categories(self._transactions)

    def load(self) -> List[TransactionRecord]:
        """Load the current user's ledger and drop any active filter."""
        user = self.session.require_user()
        self._reset(user.id)
        return list(self._transactions)

    def add_transaction(self, data: Union[TransactionCreate, Dict[str, Any]]) -> TransactionRecord:
        """
        Record a new transaction for the current user.

        Args:
            data: Validated TransactionCreate or raw form fields

        Returns:
            The locally committed transaction

        Raises:
            NotAuthenticatedError: If no user is logged in
            InvalidInputError: If the fields fail validation
        """
        user = self.session.require_user()
        if user.id != self._loaded_for:
            self._reset(user.id)
        if not isinstance(data, TransactionCreate):
            try:
                data = TransactionCreate.model_validate(data)
            except ValidationError as e:
                raise InvalidInputError(first_error_message(e))

        record = TransactionRecord(
            id=self.id_generator.next_id(),
            user_id=user.id,
            type=data.type,
            amount=data.amount,
            description=data.description,
            category=data.category,
            date=data.date,
            created_at=self.clock(),
        )
        self.store.add(user.id, record)
        self._refresh(user.id)
        logger.info("transaction_added", user_id=user.id, transaction_id=record.id)

        try:
            self.mirror.mirror_create(user.id, data)
        except Exception:
            logger.exception("mirror_schedule_failed", user_id=user.id)

        return record

    def delete_transaction(self, transaction_id: int) -> bool:
        """
        Delete one of the current user's transactions.

        Returns:
            True if the transaction existed and belonged to the user
        """
        user = self.session.require_user()
        if user.id != self._loaded_for:
            self._reset(user.id)
        removed = self.store.remove(user.id, transaction_id)
        if removed:
            self._refresh(user.id)
            logger.info("transaction_deleted", user_id=user.id, transaction_id=transaction_id)
        return removed

    def apply_filters(self, transaction_filter: TransactionFilter) -> List[TransactionRecord]:
        self._sync()
        self._filter = transaction_filter
        self._visible = apply_filters(self._transactions, transaction_filter)
        return list(self._visible)

    def clear_filters(self) -> List[TransactionRecord]:
        self._sync()
        self._filter = None
        self._visible = list(self._transactions)
        return list(self._visible)

    def _source(self, visible_only: bool) -> List[TransactionRecord]:
        self._sync()
        return self._visible if visible_only else self._transactions

    def summary(self, visible_only: bool = False) -> analytics.FinancialSummary:
        return analytics.summarize(self._source(visible_only))

    def category_breakdown(
        self, limit: Optional[int] = TOP_CATEGORY_LIMIT, visible_only: bool = False
    ) -> List[analytics.CategoryTotal]:
        return analytics.category_breakdown(self._source(visible_only), limit=limit)

    def monthly_trend(self, visible_only: bool = False) -> List[analytics.MonthlyTotals]:
        return analytics.monthly_trend(self._source(visible_only))

    def goal_progress(self) -> List[analytics.GoalProgress]:
        return analytics.savings_goals(self.summary().balance)

    def recent(self) -> List[TransactionRecord]:
        return analytics.recent(self._source(False))

    def close(self) -> None:
        """Wait for pending mirror requests and stop the mirror worker."""
        self.mirror.close()
