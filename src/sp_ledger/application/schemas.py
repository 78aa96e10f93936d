"""Pydantic schemas for sp_ledger API."""

from pydantic import BaseModel, Field

from src.sp_common.amounts import format_amount
from src.sp_common.enums import TokenKind
from src.sp_ledger.domain.ledger import Ledger


class MintRequest(BaseModel):
    account: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0, description="Amount to mint into the account")


class BalanceResponse(BaseModel):
    token: TokenKind
    symbol: str
    account: str
    balance: float
    balance_display: str

    @classmethod
    def from_ledger(cls, token: TokenKind, ledger: Ledger, account: str) -> "BalanceResponse":
        balance = ledger.balance_of(account)
        return cls(
            token=token,
            symbol=ledger.symbol,
            account=account,
            balance=balance,
            balance_display=format_amount(balance),
        )


class SupplyResponse(BaseModel):
    token: TokenKind
    symbol: str
    total_supply: float
    total_supply_display: str
    account_count: int

    @classmethod
    def from_ledger(cls, token: TokenKind, ledger: Ledger) -> "SupplyResponse":
        supply = ledger.total_supply
        return cls(
            token=token,
            symbol=ledger.symbol,
            total_supply=supply,
            total_supply_display=format_amount(supply),
            account_count=len(ledger.balances),
        )
