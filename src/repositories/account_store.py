"""Persistent store for the whole account collection."""

import json
import logging
from typing import Callable, Iterable

from src.models.account import Account
from src.models.exceptions import CorruptStateError
from src.repositories.storage_repo import StorageRepository

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "bankAccounts"

ChangeListener = Callable[[list[Account]], None]


class AccountStore:
    """
    Reads and writes the account collection as one JSON blob under a fixed key.

    There are no partial updates: every save overwrites the whole blob.
    """

    def __init__(
        self,
        storage: StorageRepository,
        key: str = DEFAULT_STORAGE_KEY,
        strict: bool = False,
    ):
        """
        Initialize the store.

        Args:
            storage: Key-value storage holding the blob
            key: The key the blob lives under
            strict: Raise CorruptStateError on an unreadable blob instead of
                falling back to an empty collection
        """
        self._storage = storage
        self._key = key
        self._strict = strict
        self._listeners: list[ChangeListener] = []

    def subscribe(self, listener: ChangeListener) -> None:
        """Register a callback invoked with the collection after every save."""
        self._listeners.append(listener)

    def load(self) -> list[Account]:
        """
        Load the full account collection.

        Returns:
            The stored accounts in stored order; an empty list if nothing is stored

        Raises:
            CorruptStateError: If the blob cannot be decoded and the store is strict
        """
        raw = self._storage.get_item(self._key)
        if raw is None:
            return []

        try:
            return self._decode(raw)
        except (ValueError, KeyError, TypeError) as err:
            if self._strict:
                raise CorruptStateError(
                    f"Stored accounts under {self._key!r} are unreadable: {err}"
                ) from err
            logger.warning(
                "Discarding unreadable account data under %r: %s", self._key, err
            )
            return []

    def save(self, accounts: Iterable[Account]) -> None:
        """
        Overwrite the stored collection and notify change listeners.

        Args:
            accounts: The full collection to store
        """
        accounts = list(accounts)
        blob = json.dumps([account.to_dict() for account in accounts], ensure_ascii=False)
        self._storage.set_item(self._key, blob)
        logger.debug("Saved %d accounts under %r", len(accounts), self._key)

        for listener in self._listeners:
            listener(accounts)

    def _decode(self, raw: str) -> list[Account]:
        records = json.loads(raw)
        if not isinstance(records, list):
            raise TypeError(f"Expected a list of accounts, got {type(records).__name__}")

        accounts = []
        seen = set()
        for record in records:
            if not isinstance(record, dict):
                raise TypeError(f"Expected an account record, got {record!r}")
            account = Account.from_dict(record)
            if account.account_no in seen:
                raise ValueError(f"Duplicate account number {account.account_no}")
            seen.add(account.account_no)
            accounts.append(account)
        return accounts
