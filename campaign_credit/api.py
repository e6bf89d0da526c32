from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware

from .config import CreditRewardSettings
from .memory import (
    InMemoryAccountResolver, InMemoryTransactionPoster, DuplicateTransactionError,
)
from .models import (
    Account, LedgerEntry, ProcessAwardRequest, ProcessAwardResponse, Reward, User,
)
from .processor import CreditRewardProcessor, CreditRewardError, InvalidAmountError

app = FastAPI(
    title="Campaign Credit API",
    description="Credits campaign awards to user points accounts and records the transaction reference",
    version="1.0.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

account_resolver = InMemoryAccountResolver()
transaction_poster = InMemoryTransactionPoster()
settings = CreditRewardSettings.from_env()
processor = CreditRewardProcessor(account_resolver, transaction_poster, settings)


@app.get("/health", tags=["System"])
def health_check():
    return {"status": "healthy", "service": "campaign-credit"}


@app.post("/awards/credit", response_model=ProcessAwardResponse, status_code=status.HTTP_201_CREATED, tags=["Awards"])
def credit_award(request: ProcessAwardRequest) -> ProcessAwardResponse:
    if not processor.supports(request.award.type):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Award type {request.award.type.value} is not handled by this service",
        )

    reward = Reward(id=request.reward_id)
    try:
        processor.process(User(id=request.user_id), request.award, reward)
    except InvalidAmountError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateTransactionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except CreditRewardError as e:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(e))

    return ProcessAwardResponse(
        reward=reward,
        currency=settings.default_currency_code,
        message="Credit reward processed successfully",
    )


@app.get("/users/{user_id}/accounts/{currency_code}", response_model=Account, tags=["Accounts"])
def get_account(user_id: str, currency_code: str) -> Account:
    account = account_resolver.find_account(user_id, currency_code)
    if account is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"No {currency_code} account for user {user_id}")
    return account


@app.get("/transactions/{reference}", response_model=LedgerEntry, tags=["Transactions"])
def get_transaction(reference: str) -> LedgerEntry:
    entry = transaction_poster.get_entry(reference)
    if entry is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Transaction {reference} not found")
    return entry


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
