"""StakingPool: time-weighted reward accrual with per-deposit locks.

Accounting follows the accumulated-per-share scheme:

    acc_token_per_share += elapsed * reward_per_second / total_staking_tokens

and each deposit slot remembers `reward_debt = amount * acc_token_per_share`
at its last touch, so `amount * acc_token_per_share - reward_debt` is the
reward accrued since then. Rewards only accrue inside [start_time, end_time].

Deposit and withdraw validate every precondition before mutating anything;
a raised AppError leaves pool and ledger state as it was (accrual brought
current by _update_pool aside, which is idempotent bookkeeping).
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from src.sp_common.amounts import round_reward
from src.sp_common.clock import Clock, SystemClock
from src.sp_common.errors import DepositNotFoundError
from src.sp_ledger.domain.ledger import Ledger
from src.sp_staking.domain.constants import POOL_ACCOUNT_ID
from src.sp_staking.domain.models import (
    DepositInfo,
    PoolSnapshot,
    UserInfo,
    WithdrawResult,
)
from src.sp_staking.rules.amount import check_amount, check_withdrawable
from src.sp_staking.rules.lock_period import check_lock_expired
from src.sp_staking.rules.mining_window import check_mining_window
from src.sp_staking.rules.pool_status import check_deposit_open, check_withdraw_open
from src.sp_staking.rules.reward_supply import check_reward_supply
from src.sp_staking.rules.staker import check_staker

logger = logging.getLogger(__name__)


class StakingPool:
    def __init__(
        self,
        staked_ledger: Ledger,
        reward_ledger: Ledger,
        reward_per_second: float,
        start_time: int,
        end_time: int,
        lock_duration: int,
        clock: Clock | None = None,
        account_id: str = POOL_ACCOUNT_ID,
    ) -> None:
        if reward_per_second < 0:
            raise ValueError(f"reward_per_second must be >= 0, got {reward_per_second}")
        if end_time <= start_time:
            raise ValueError(f"end_time ({end_time}) must be after start_time ({start_time})")
        if lock_duration <= 0:
            raise ValueError(f"lock_duration must be > 0, got {lock_duration}")

        self.staked_ledger = staked_ledger
        self.reward_ledger = reward_ledger
        self.account_id = account_id
        self.clock: Clock = clock or SystemClock()

        self.reward_per_second = reward_per_second
        self.start_time = start_time
        self.end_time = end_time
        self.lock_duration = lock_duration
        self.last_reward_time = start_time
        self.acc_token_per_share: float = 0
        self.total_staking_tokens: float = 0
        self.total_reward_tokens: float = 0
        self.paused = False

        self._user_infos: dict[str, UserInfo] = {}
        self._deposit_infos: dict[str, dict[int, DepositInfo]] = {}

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def user_infos(self) -> Mapping[str, UserInfo]:
        return MappingProxyType(self._user_infos)

    @property
    def deposit_infos(self) -> Mapping[str, Mapping[int, DepositInfo]]:
        return MappingProxyType(self._deposit_infos)

    def get_user_info(self, staker: str) -> UserInfo | None:
        return self._user_infos.get(staker)

    def get_deposit_info(self, staker: str, deposit_id: int) -> DepositInfo | None:
        return self._deposit_infos.get(staker, {}).get(deposit_id)

    def snapshot(self) -> PoolSnapshot:
        return PoolSnapshot(
            start_time=self.start_time,
            end_time=self.end_time,
            lock_duration=self.lock_duration,
            reward_per_second=self.reward_per_second,
            last_reward_time=self.last_reward_time,
            acc_token_per_share=self.acc_token_per_share,
            total_staking_tokens=self.total_staking_tokens,
            total_reward_tokens=self.total_reward_tokens,
            paused=self.paused,
        )

    def _get_or_create_user(self, staker: str) -> UserInfo:
        if staker not in self._user_infos:
            self._user_infos[staker] = UserInfo()
        return self._user_infos[staker]

    def _get_or_create_deposit(self, staker: str, deposit_id: int) -> DepositInfo:
        slots = self._deposit_infos.setdefault(staker, {})
        if deposit_id not in slots:
            slots[deposit_id] = DepositInfo()
        return slots[deposit_id]

    # ------------------------------------------------------------------
    # Deposit
    # ------------------------------------------------------------------

    def deposit_new(self, staker: str, amount: float) -> int:
        """Stake `amount` into a freshly allocated slot. Returns its id."""
        now = self._check_deposit(staker, amount)
        self._update_pool(now)
        self.staked_ledger.transfer(staker, self.account_id, amount)

        user = self._get_or_create_user(staker)
        deposit_id = user.next_deposit_id
        user.next_deposit_id += 1
        self._apply_deposit(staker, user, deposit_id, amount, now)
        return deposit_id

    def deposit_into_existing(self, staker: str, amount: float, deposit_id: int) -> int:
        """Top up an allocated slot. Restarts that slot's lock."""
        now = self._check_deposit(staker, amount)
        user = self._user_infos.get(staker)
        if user is None or not 0 <= deposit_id < user.next_deposit_id:
            raise DepositNotFoundError(staker, deposit_id)

        self._update_pool(now)
        self.staked_ledger.transfer(staker, self.account_id, amount)
        self._apply_deposit(staker, user, deposit_id, amount, now)
        return deposit_id

    def deposit_tokens(self, staker: str, amount: float) -> int:
        return self.deposit_new(staker, amount)

    def deposit_tokens_with_id(self, staker: str, amount: float, deposit_id: int) -> int:
        """Ids at or above the staker's next_deposit_id allocate a new slot."""
        user = self._user_infos.get(staker)
        next_deposit_id = user.next_deposit_id if user is not None else 0
        if deposit_id >= next_deposit_id:
            return self.deposit_new(staker, amount)
        return self.deposit_into_existing(staker, amount, deposit_id)

    def _check_deposit(self, staker: str, amount: float) -> int:
        now = self.clock.now()
        check_deposit_open(self.paused)
        check_staker(staker, self.account_id)
        check_mining_window(now, self.start_time, self.end_time)
        check_amount(amount)
        return now

    def _apply_deposit(
        self, staker: str, user: UserInfo, deposit_id: int, amount: float, now: int
    ) -> None:
        deposit = self._get_or_create_deposit(staker, deposit_id)
        if deposit.amount > 0:
            deposit.reward_pending += self._accrued(deposit, self.acc_token_per_share)

        user.total_amount += amount
        self.total_staking_tokens += amount

        deposit.amount += amount
        deposit.lock_from = now
        deposit.lock_to = now + self.lock_duration
        deposit.reward_debt = deposit.amount * self.acc_token_per_share
        logger.info("Deposit %s, %s, %s", staker, amount, deposit_id)

    # ------------------------------------------------------------------
    # Withdraw
    # ------------------------------------------------------------------

    def withdraw_tokens(self, staker: str, amount: float, deposit_id: int) -> WithdrawResult:
        """Withdraw principal from an unlocked slot and collect its reward."""
        now = self.clock.now()
        check_withdraw_open(self.paused)
        check_staker(staker, self.account_id)
        check_amount(amount)
        deposit = check_withdrawable(self.get_deposit_info(staker, deposit_id), amount)
        check_lock_expired(deposit, now)

        projected = self._projected_acc_token_per_share(now)
        owed = deposit.reward_pending + self._accrued(deposit, projected)
        if owed > 0:
            check_reward_supply(round_reward(owed), self.total_reward_tokens)

        self._update_pool(now)
        deposit.reward_pending += self._accrued(deposit, self.acc_token_per_share)
        reward_paid: float = 0
        if deposit.reward_pending > 0:
            reward_paid = self._safe_reward_transfer(staker, deposit.reward_pending)
            # Sub-precision rewards stay pending until they round to a payable amount.
            if reward_paid > 0:
                deposit.reward_pending = 0

        user = self._user_infos[staker]
        user.total_amount -= amount
        self.total_staking_tokens -= amount

        deposit.amount -= amount
        deposit.reward_debt = deposit.amount * self.acc_token_per_share

        self.staked_ledger.transfer(self.account_id, staker, amount)
        logger.info("Withdraw %s, %s, %s", staker, amount, deposit_id)
        return WithdrawResult(
            staker=staker, deposit_id=deposit_id, amount=amount, reward_paid=reward_paid
        )

    def _safe_reward_transfer(self, to: str, amount: float) -> float:
        """Pay `amount` rounded to 4 decimals. Returns what was paid."""
        safe_amount = round_reward(amount)
        check_reward_supply(safe_amount, self.total_reward_tokens)
        if safe_amount <= 0:
            logger.debug("Reward %s for %s rounds to zero, nothing paid", amount, to)
            return 0

        self.total_reward_tokens -= safe_amount
        self.reward_ledger.transfer(self.account_id, to, safe_amount)
        logger.info("Transfer %s rewards to %s", safe_amount, to)
        return safe_amount

    # ------------------------------------------------------------------
    # Views and admin
    # ------------------------------------------------------------------

    def pending_reward(self, staker: str, deposit_id: int) -> float:
        deposit = self.get_deposit_info(staker, deposit_id)
        if deposit is None:
            raise DepositNotFoundError(staker, deposit_id)
        projected = self._projected_acc_token_per_share(self.clock.now())
        return deposit.reward_pending + self._accrued(deposit, projected)

    def pause(self, status: bool) -> None:
        self.paused = status
        logger.info("Pool %s", "paused" if status else "unpaused")

    def add_reward_tokens(self, amount: float) -> None:
        # Mint first: the ledger rejects bad amounts before the counter moves.
        self.reward_ledger.mint(self.account_id, amount)
        self.total_reward_tokens += amount
        logger.info("Add %s tokens to the reward pool", amount)

    # ------------------------------------------------------------------
    # Accrual
    # ------------------------------------------------------------------

    def get_multiplier(self, from_time: int, to_time: int) -> int:
        """Seconds of [from_time, to_time] that fall before end_time."""
        if to_time <= self.end_time:
            return to_time - from_time
        if from_time >= self.end_time:
            return 0
        return self.end_time - from_time

    def _projected_acc_token_per_share(self, now: int) -> float:
        if now <= self.last_reward_time or self.total_staking_tokens == 0:
            return self.acc_token_per_share
        multiplier = self.get_multiplier(self.last_reward_time, now)
        token_reward = multiplier * self.reward_per_second
        return self.acc_token_per_share + token_reward / self.total_staking_tokens

    def _update_pool(self, now: int) -> None:
        # Nothing staked: the interval's reward is forfeited, not carried over.
        if self.total_staking_tokens == 0:
            self.last_reward_time = now
            return
        if now <= self.last_reward_time:
            return
        self.acc_token_per_share = self._projected_acc_token_per_share(now)
        self.last_reward_time = now
        logger.debug(
            "Pool updated: acc_token_per_share=%s at %d", self.acc_token_per_share, now
        )

    @staticmethod
    def _accrued(deposit: DepositInfo, acc_token_per_share: float) -> float:
        return deposit.amount * acc_token_per_share - deposit.reward_debt
