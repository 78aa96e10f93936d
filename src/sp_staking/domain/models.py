"""Domain models for sp_staking. Plain dataclasses without business logic."""

from dataclasses import dataclass


@dataclass
class UserInfo:
    total_amount: float = 0         # sum of active deposit amounts
    next_deposit_id: int = 0        # next id handed out by deposit_new


@dataclass
class DepositInfo:
    amount: float = 0
    lock_from: int = 0
    lock_to: int = 0                # lock_from + lock_duration
    reward_debt: float = 0          # amount * acc_token_per_share at last touch
    reward_pending: float = 0       # settled but not yet paid out


@dataclass
class WithdrawResult:
    staker: str
    deposit_id: int
    amount: float
    reward_paid: float


@dataclass
class PoolSnapshot:
    start_time: int
    end_time: int
    lock_duration: int
    reward_per_second: float
    last_reward_time: int
    acc_token_per_share: float
    total_staking_tokens: float
    total_reward_tokens: float
    paused: bool
