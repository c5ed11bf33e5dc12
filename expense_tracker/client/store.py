import logging
from typing import Any, List, Mapping, Optional

import requests
from pydantic import ValidationError as SchemaError

from expense_tracker.client.errors import NotFound, StoreUnavailable, ValidationError
from expense_tracker.client.models import DEFAULT_CATEGORY, DEFAULT_TYPE, Transaction
from expense_tracker.client.validation import validate_fields
from expense_tracker.core.settings import settings

logger = logging.getLogger(__name__)


class StoreAccessor:
    """Issues the four CRUD calls against the ``/expenses`` resource.

    Every call is a single round trip. Nothing is retried; failures are
    raised as :class:`NotFound`, :class:`StoreUnavailable` or (before any
    request) :class:`ValidationError`.

    ``session`` may be any object exposing ``get/post/put/delete`` that
    return responses with ``status_code`` and ``json()``; a
    :class:`requests.Session` is used when omitted.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Any = None,
        timeout: Optional[float] = None,
    ):
        if base_url is None:
            base_url = settings.API_BASE_URL
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout if timeout is not None else settings.API_TIMEOUT_SECONDS

    def _url(self, transaction_id: Optional[str] = None) -> str:
        if transaction_id is None:
            return f"{self.base_url}/expenses"
        return f"{self.base_url}/expenses/{transaction_id}"

    def _send(self, method: str, url: str, **kwargs):
        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        try:
            return getattr(self.session, method)(url, **kwargs)
        except requests.RequestException as e:
            logger.error(f"{method.upper()} {url} failed: {e}")
            raise StoreUnavailable(f"Could not reach the expense store: {e}") from e

    @staticmethod
    def _error_message(response) -> str:
        try:
            body = response.json()
        except ValueError:
            return f"HTTP {response.status_code}"
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return f"HTTP {response.status_code}"

    def _check(self, response, transaction_id: Optional[str] = None):
        if response.status_code == 404 and transaction_id is not None:
            raise NotFound(transaction_id)
        if response.status_code == 400:
            raise ValidationError(self._error_message(response))
        if not 200 <= response.status_code < 300:
            message = self._error_message(response)
            logger.error(f"Expense store answered {response.status_code}: {message}")
            raise StoreUnavailable(message, status_code=response.status_code)

    @staticmethod
    def _body(response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"Expense store answered {response.status_code} without a JSON body")
            raise StoreUnavailable(f"Unreadable answer from the expense store: {e}") from e

    @staticmethod
    def _parse(body: Any) -> Transaction:
        try:
            return Transaction.model_validate(body)
        except SchemaError as e:
            raise StoreUnavailable(f"Malformed expense record from store: {e}") from e

    def list(self) -> List[Transaction]:
        response = self._send("get", self._url())
        self._check(response)
        body = self._body(response)
        if not isinstance(body, list):
            raise StoreUnavailable("Expected a list of expenses from the store")
        return [self._parse(item) for item in body]

    def create(self, candidate: Mapping[str, Any]) -> Transaction:
        payload = validate_fields(candidate)
        payload.setdefault("category", DEFAULT_CATEGORY)
        payload.setdefault("type", DEFAULT_TYPE)
        response = self._send("post", self._url(), json=payload)
        self._check(response)
        return self._parse(self._body(response))

    def update(self, transaction_id: str, fields: Mapping[str, Any]) -> Transaction:
        payload = validate_fields(fields, partial=True)
        response = self._send("put", self._url(transaction_id), json=payload)
        self._check(response, transaction_id)
        return self._parse(self._body(response))

    def delete(self, transaction_id: str) -> None:
        response = self._send("delete", self._url(transaction_id))
        self._check(response, transaction_id)
