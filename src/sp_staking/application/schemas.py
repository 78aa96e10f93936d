"""Pydantic schemas for sp_staking API."""

from pydantic import BaseModel, Field

from src.sp_common.amounts import format_amount
from src.sp_common.clock import to_utc_iso
from src.sp_staking.domain.models import DepositInfo, PoolSnapshot, UserInfo, WithdrawResult

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class DepositRequest(BaseModel):
    staker: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0, description="Amount of staked token to lock")
    deposit_id: int | None = Field(
        None, ge=0, description="Existing slot to top up; omit to open a new slot"
    )


class WithdrawRequest(BaseModel):
    staker: str = Field(..., min_length=1)
    amount: float = Field(..., gt=0)
    deposit_id: int = Field(..., ge=0)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class DepositInfoResponse(BaseModel):
    staker: str
    deposit_id: int
    amount: float
    amount_display: str
    lock_from: int
    lock_to: int
    lock_to_iso: str
    reward_debt: float
    reward_pending: float

    @classmethod
    def from_domain(cls, staker: str, deposit_id: int, d: DepositInfo) -> "DepositInfoResponse":
        return cls(
            staker=staker,
            deposit_id=deposit_id,
            amount=d.amount,
            amount_display=format_amount(d.amount),
            lock_from=d.lock_from,
            lock_to=d.lock_to,
            lock_to_iso=to_utc_iso(d.lock_to),
            reward_debt=d.reward_debt,
            reward_pending=d.reward_pending,
        )


class UserInfoResponse(BaseModel):
    staker: str
    total_amount: float
    total_amount_display: str
    next_deposit_id: int
    deposits: list[DepositInfoResponse]

    @classmethod
    def from_domain(
        cls, staker: str, user: UserInfo, deposits: list[DepositInfoResponse]
    ) -> "UserInfoResponse":
        return cls(
            staker=staker,
            total_amount=user.total_amount,
            total_amount_display=format_amount(user.total_amount),
            next_deposit_id=user.next_deposit_id,
            deposits=deposits,
        )


class WithdrawResponse(BaseModel):
    staker: str
    deposit_id: int
    withdrawn: float
    withdrawn_display: str
    reward_paid: float
    reward_paid_display: str

    @classmethod
    def from_result(cls, r: WithdrawResult) -> "WithdrawResponse":
        return cls(
            staker=r.staker,
            deposit_id=r.deposit_id,
            withdrawn=r.amount,
            withdrawn_display=format_amount(r.amount),
            reward_paid=r.reward_paid,
            reward_paid_display=format_amount(r.reward_paid),
        )


class PendingRewardResponse(BaseModel):
    staker: str
    deposit_id: int
    pending_reward: float
    as_of: int


class PoolStateResponse(BaseModel):
    start_time: int
    end_time: int
    lock_duration: int
    reward_per_second: float
    last_reward_time: int
    acc_token_per_share: float
    total_staking_tokens: float
    total_reward_tokens: float
    paused: bool
    now: int

    @classmethod
    def from_snapshot(cls, s: PoolSnapshot, now: int) -> "PoolStateResponse":
        return cls(
            start_time=s.start_time,
            end_time=s.end_time,
            lock_duration=s.lock_duration,
            reward_per_second=s.reward_per_second,
            last_reward_time=s.last_reward_time,
            acc_token_per_share=s.acc_token_per_share,
            total_staking_tokens=s.total_staking_tokens,
            total_reward_tokens=s.total_reward_tokens,
            paused=s.paused,
            now=now,
        )
