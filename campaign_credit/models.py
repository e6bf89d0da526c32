from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Protocol, Union
from uuid import UUID
from pydantic import BaseModel, Field, ConfigDict


class AwardType(str, Enum):
    CREDIT = "CREDIT"
    COUPON = "COUPON"
    COUPON_LOCAL = "COUPON_LOCAL"
    SPU_QUALIFICATION = "SPU_QUALIFICATION"


class Principal(Protocol):
    @property
    def id(self) -> Optional[Union[str, int]]: ...


class User(BaseModel):
    id: Optional[Union[int, str]] = None
    username: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class Campaign(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class Award(BaseModel):
    id: int
    type: AwardType = AwardType.CREDIT
    value: Union[int, Decimal, float, str] = Field(..., description="Credit amount, coerced to an integer")
    campaign: Campaign

    model_config = ConfigDict(from_attributes=True, json_schema_extra={
        "example": {
            "id": 1,
            "type": "CREDIT",
            "value": "100",
            "campaign": {"id": 1, "name": "Spring Campaign"}
        }
    })


class Reward(BaseModel):
    id: Optional[int] = None
    sn: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class Account(BaseModel):
    id: UUID
    user_id: str
    currency_code: str
    balance: int = 0
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class LedgerEntry(BaseModel):
    id: UUID
    account_id: UUID
    reference: str
    amount: int
    balance_after: int
    remark: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProcessAwardRequest(BaseModel):
    user_id: str
    award: Award
    reward_id: Optional[int] = None

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "user_id": "550e8400-e29b-41d4-a716-446655440000",
            "award": {"id": 1, "type": "CREDIT", "value": "100", "campaign": {"id": 1, "name": "Spring Campaign"}},
            "reward_id": 10
        }
    })


class ProcessAwardResponse(BaseModel):
    reward: Reward
    currency: str
    message: str
