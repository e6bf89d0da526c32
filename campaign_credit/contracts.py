"""Seams between the campaign engine, this package and the credit ledger."""

from abc import ABC, abstractmethod
from typing import Any, Protocol

from .models import AwardType, Award, Principal, Reward


class AccountResolver(Protocol):
    def get_account_by_user(self, user: Principal, currency_code: str) -> Any: ...


class TransactionPoster(Protocol):
    def increase(self, reference: str, account: Any, amount: int, remark: str) -> Any: ...


class RewardProcessor(ABC):
    """Handler the campaign engine calls for awards of the kinds it supports.

    When several processors support a kind, the engine orders them by
    ``get_priority()``, highest first.
    """

    @abstractmethod
    def supports(self, award_type: AwardType) -> bool: ...

    @abstractmethod
    def process(self, user: Principal, award: Award, reward: Reward) -> None: ...

    @abstractmethod
    def get_priority(self) -> int: ...
