"""
HTTP client for the finance tracker API.
"""

from typing import Any, Dict, List, Optional

import requests

from exceptions import ApiError
from models import TransactionCreate, TransactionRecord, UserRecord


class FinanceApiClient:
    """Thin wrapper over the JSON endpoints."""

    def __init__(
        self,
        base_url: str,
        timeout: float = 10,
        http: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.http = http or requests.Session()

    def _request(self, method: str, path: str, payload: Optional[Dict[str, Any]] = None) -> Any:
        response = self.http.request(
            method, f"{self.base_url}{path}", json=payload, timeout=self.timeout
        )
        if response.status_code >= 400:
            message = None
            try:
                message = response.json().get("message")
            except ValueError:
                pass
            raise ApiError(response.status_code, message)
        return response.json()

    def register(self, name: str, email: str, password: str) -> UserRecord:
        data = self._request(
            "POST", "/api/register", {"name": name, "email": email, "password": password}
        )
        return UserRecord.model_validate(data)

    def login(self, email: str, password: str) -> UserRecord:
        data = self._request("POST", "/api/login", {"email": email, "password": password})
        return UserRecord.model_validate(data)

    def list_transactions(self, user_id: int) -> List[TransactionRecord]:
        data = self._request("GET", f"/api/transactions/{user_id}")
        return [TransactionRecord.model_validate(item) for item in data]

    def create_transaction(self, user_id: int, transaction: TransactionCreate) -> TransactionRecord:
        payload = transaction.model_dump(mode="json", by_alias=True)
        payload["userId"] = user_id
        data = self._request("POST", "/api/transactions", payload)
        return TransactionRecord.model_validate(data)

    def delete_transaction(self, user_id: int, transaction_id: int) -> None:
        self._request("DELETE", f"/api/transactions/{transaction_id}", {"userId": user_id})

    def close(self) -> None:
        self.http.close()
