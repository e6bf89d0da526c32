import logging
import math
import re
from decimal import Decimal
from typing import Any, Optional
from uuid import uuid4

from .config import CreditRewardSettings
from .contracts import AccountResolver, RewardProcessor, TransactionPoster
from .models import Award, AwardType, Principal, Reward

logger = logging.getLogger(__name__)

REFERENCE_PREFIX = "CAMPAIGN"
INVALID_AMOUNT_MESSAGE = "Credit amount must be greater than 0"

_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)


class CreditRewardError(Exception):
    pass


class InvalidAmountError(CreditRewardError, ValueError):
    def __init__(self, message: str = INVALID_AMOUNT_MESSAGE):
        super().__init__(message)


def parse_amount(value: Any) -> int:
    """Coerce an award value to an integer credit amount.

    Strings contribute their leading ASCII number (``"12abc"`` -> 12,
    ``"1.9"`` -> 1, ``"1.5e2"`` -> 150); a fraction or exponent is read as a
    float and truncated. Values that carry no number at all come out as 0.
    """
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float, Decimal)):
        try:
            return int(value)
        except (ValueError, OverflowError):
            return 0
    if isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if not match:
            return 0
        number = match.group(1)
        if "." not in number and "e" not in number.lower():
            return int(number)
        as_float = float(number)
        return int(as_float) if math.isfinite(as_float) else 0
    return 0


def make_transaction_reference(award_id: int) -> str:
    return f"{REFERENCE_PREFIX}-{award_id}-{uuid4()}"


def principal_id(user: Principal) -> Any:
    user_id = getattr(user, "id", None)
    return "unknown" if user_id is None else user_id


class CreditRewardProcessor(RewardProcessor):
    """Credits campaign awards of type CREDIT to the user's points account.

    The generated transaction reference is written to ``reward.sn`` once the
    ledger accepted the posting. Collaborator failures are logged and
    re-raised untouched; nothing is retried.
    """

    def __init__(
        self,
        account_resolver: AccountResolver,
        transaction_poster: TransactionPoster,
        settings: Optional[CreditRewardSettings] = None,
    ):
        self.account_resolver = account_resolver
        self.transaction_poster = transaction_poster
        self.settings = settings or CreditRewardSettings()

    def supports(self, award_type: AwardType) -> bool:
        return award_type == AwardType.CREDIT

    def get_priority(self) -> int:
        return 0

    def process(self, user: Principal, award: Award, reward: Reward) -> None:
        amount = parse_amount(award.value)
        if amount <= 0:
            raise InvalidAmountError()

        failure = "unexpected"
        try:
            currency_code = self.settings.default_currency_code

            failure = "account_resolution"
            account = self.account_resolver.get_account_by_user(user, currency_code)
            failure = "unexpected"

            remark = self.settings.remark_for(award.campaign)
            reference = make_transaction_reference(award.id)

            failure = "ledger_posting"
            self.transaction_poster.increase(reference, account, amount, remark)
            failure = "unexpected"

            reward.sn = reference

            logger.info("Credit reward processed successfully", extra={
                "amount": amount,
                "currency": currency_code,
                "user_id": principal_id(user),
                "transaction_id": reference,
                "campaign_id": award.campaign.id,
                "award_id": award.id,
                "remark": remark,
            })
        except Exception as e:
            logger.error("Failed to process credit reward", exc_info=True, extra={
                "amount": amount,
                "user_id": principal_id(user),
                "campaign_id": award.campaign.id,
                "award_id": award.id,
                "error": str(e),
                "failure": failure,
            })
            raise
