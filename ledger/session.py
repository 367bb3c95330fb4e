"""
Current-user state for one client context.
"""

import json
from typing import Optional

import structlog
from pydantic import ValidationError

from constants import CURRENT_USER_KEY
from exceptions import NotAuthenticatedError
from ledger.storage import KeyValueStore
from models import UserRecord

logger = structlog.get_logger(__name__)


class Session:
    """
    Holds the logged in user, persisted under a fixed key so it survives a
    restart. Not thread-safe; one session per client context.
    """

    def __init__(self, store: KeyValueStore):
        self.store = store

    @property
    def current_user(self) -> Optional[UserRecord]:
        try:
            raw = self.store.get_item(CURRENT_USER_KEY)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("session_unreadable", error=str(e))
            return None
        if not raw:
            return None
        try:
            return UserRecord.model_validate(json.loads(raw))
        except (ValueError, ValidationError) as e:
            logger.warning("session_corrupt", error=str(e))
            return None

    @property
    def is_authenticated(self) -> bool:
        return self.current_user is not None

    def login(self, user: UserRecord) -> None:
        self.store.set_item(CURRENT_USER_KEY, json.dumps(user.model_dump(mode="json", by_alias=True)))
        logger.info("session_started", user_id=user.id)

    def logout(self) -> None:
        self.store.remove_item(CURRENT_USER_KEY)
        logger.info("session_cleared")

    def require_user(self) -> UserRecord:
        user = self.current_user
        if user is None:
            raise NotAuthenticatedError("User not authenticated")
        return user
