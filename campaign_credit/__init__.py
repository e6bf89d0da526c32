"""
Campaign Credit Rewards

Bridges the campaign engine and the credit ledger:
- Handles awards of type CREDIT
- Resolves the user's points account for the configured currency
- Posts an increase transaction keyed by a fresh CAMPAIGN-<award>-<uuid> reference
- Records the reference on the reward for auditing
"""

from .config import CreditRewardSettings
from .contracts import AccountResolver, TransactionPoster, RewardProcessor
from .models import (
    AwardType,
    Award,
    Campaign,
    Reward,
    User,
)
from .processor import CreditRewardProcessor, CreditRewardError, InvalidAmountError

__all__ = [
    "AwardType",
    "Award",
    "Campaign",
    "Reward",
    "User",
    "CreditRewardSettings",
    "AccountResolver",
    "TransactionPoster",
    "RewardProcessor",
    "CreditRewardProcessor",
    "CreditRewardError",
    "InvalidAmountError",
]
