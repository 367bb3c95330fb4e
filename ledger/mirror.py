"""
Best-effort propagation of local writes to the remote API.

The mirror never raises into the caller: the request runs on a background
worker and any failure goes to the injected failure handler, then is
dropped. There is no retry and no queue beyond the worker's backlog.

The backlog is unbounded and `close()` drains it, so shutting down can wait
up to the request timeout for each pending request. Close the mirror (or the
LedgerService that owns it) before exit rather than relying on the
interpreter's exit-time join.
"""

from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Optional

import structlog

from ledger.api_client import FinanceApiClient
from models import TransactionCreate, TransactionRecord

logger = structlog.get_logger(__name__)

FailureHandler = Callable[[Exception, dict], None]


def log_mirror_failure(error: Exception, payload: dict) -> None:
    """Default failure handler."""
    logger.warning(
        "mirror_failed",
        user_id=payload.get("userId"),
        error_type=type(error).__name__,
        error=str(error),
    )


class NullMirror:
    """Mirror used when the client runs offline."""

    def mirror_create(self, user_id: int, transaction: TransactionCreate) -> Future:
        future: Future = Future()
        future.set_result(None)
        return future

    def close(self) -> None:
        pass


class RemoteMirror:
    """Forwards new transactions to the API without blocking the caller."""

    def __init__(
        self,
        client: FinanceApiClient,
        on_failure: Optional[FailureHandler] = None,
        executor: Optional[ThreadPoolExecutor] = None,
    ):
        self.client = client
        self.on_failure = on_failure or log_mirror_failure
        self._executor = executor or ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="ledger-mirror"
        )

    def mirror_create(self, user_id: int, transaction: TransactionCreate) -> Future:
        """
        Schedule a create request for ``transaction`` owned by ``user_id``.

        Returns:
            Future resolving to the remote TransactionRecord, or None when the
            request failed
        """
        return self._executor.submit(self._send, user_id, transaction)

    def _send(self, user_id: int, transaction: TransactionCreate) -> Optional[TransactionRecord]:
        try:
            created = self.client.create_transaction(user_id, transaction)
        except Exception as e:
            payload = transaction.model_dump(mode="json", by_alias=True)
            payload["userId"] = user_id
            self._report(e, payload)
            return None
        logger.debug("mirror_succeeded", user_id=user_id, remote_id=created.id)
        return created

    def _report(self, error: Exception, payload: dict) -> None:
        try:
            self.on_failure(error, payload)
        except Exception:
            logger.exception("mirror_failure_handler_raised")

    def close(self) -> None:
        """Wait for in-flight requests and stop the worker."""
        self._executor.shutdown(wait=True)
