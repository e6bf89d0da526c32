import threading
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from .models import Account, LedgerEntry, Principal
from .processor import CreditRewardError


class AccountResolutionError(CreditRewardError):
    pass


class DuplicateTransactionError(CreditRewardError):
    pass


class InMemoryAccountResolver:
    """Creates one account per (user id, currency code) on first lookup."""

    def __init__(self):
        self.accounts: dict[tuple[str, str], Account] = {}
        self._lock = threading.Lock()

    def get_account_by_user(self, user: Principal, currency_code: str) -> Account:
        user_id = getattr(user, "id", None)
        if user_id is None:
            raise AccountResolutionError("Cannot resolve an account for a user without an id")

        key = (str(user_id), currency_code)
        with self._lock:
            account = self.accounts.get(key)
            if account is None:
                account = Account(
                    id=uuid4(),
                    user_id=str(user_id),
                    currency_code=currency_code,
                    balance=0,
                    created_at=datetime.now(timezone.utc),
                )
                self.accounts[key] = account
        return account

    def find_account(self, user_id: str, currency_code: str) -> Optional[Account]:
        return self.accounts.get((user_id, currency_code))


class InMemoryTransactionPoster:
    # FastAPI runs sync endpoints in a threadpool, so postings can race.
    def __init__(self):
        self.entries: dict[str, LedgerEntry] = {}
        self._lock = threading.Lock()

    def increase(self, reference: str, account: Account, amount: int, remark: str) -> LedgerEntry:
        if amount <= 0:
            raise CreditRewardError(f"Cannot increase account {account.id} by {amount}")

        with self._lock:
            if reference in self.entries:
                raise DuplicateTransactionError(f"Transaction {reference} already posted")

            account.balance += amount
            entry = LedgerEntry(
                id=uuid4(),
                account_id=account.id,
                reference=reference,
                amount=amount,
                balance_after=account.balance,
                remark=remark,
                created_at=datetime.now(timezone.utc),
            )
            self.entries[reference] = entry
        return entry

    def get_entry(self, reference: str) -> Optional[LedgerEntry]:
        return self.entries.get(reference)
