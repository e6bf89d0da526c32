import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from .models import Campaign

CURRENCY_CODE_ENV = "DEFAULT_CREDIT_CURRENCY_CODE"
REMARK_ENV = "CAMPAIGN_AWARD_CREDIT_REMARK"

DEFAULT_CURRENCY_CODE = "CREDIT"


class CreditRewardSettings(BaseModel):
    """Options for crediting campaign awards.

    ``award_credit_remark`` left unset means the campaign name is used as
    the transaction remark.
    """

    default_currency_code: str = Field(default=DEFAULT_CURRENCY_CODE)
    award_credit_remark: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "CreditRewardSettings":
        environ = os.environ if environ is None else environ
        values = {}
        if environ.get(CURRENCY_CODE_ENV) is not None:
            values["default_currency_code"] = environ[CURRENCY_CODE_ENV]
        if environ.get(REMARK_ENV) is not None:
            values["award_credit_remark"] = environ[REMARK_ENV]
        return cls(**values)

    def remark_for(self, campaign: Campaign) -> str:
        if self.award_credit_remark is not None:
            return self.award_credit_remark
        return campaign.name
