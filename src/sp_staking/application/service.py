"""StakingApplicationService: thin composition layer over StakingPool.

Translates domain objects into response schemas and runs the invariant
check after every state-changing call. The process holds one pool; the
module-level factory builds it lazily from settings.
"""

import logging

from src.sp_common.clock import SystemClock
from src.sp_common.enums import TokenKind
from src.sp_common.errors import StakerNotFoundError
from src.sp_ledger.domain.ledger import Ledger
from src.sp_staking.application.schemas import (
    DepositInfoResponse,
    PendingRewardResponse,
    PoolStateResponse,
    UserInfoResponse,
    WithdrawResponse,
)
from src.sp_staking.domain.invariants import verify_pool_invariants
from src.sp_staking.domain.pool import StakingPool

logger = logging.getLogger(__name__)


class StakingApplicationService:
    def __init__(self, pool: StakingPool) -> None:
        self.pool = pool

    def ledger_for(self, token: TokenKind) -> Ledger:
        if token is TokenKind.REWARD:
            return self.pool.reward_ledger
        return self.pool.staked_ledger

    def deposit(
        self, staker: str, amount: float, deposit_id: int | None = None
    ) -> DepositInfoResponse:
        if deposit_id is None:
            deposit_id = self.pool.deposit_new(staker, amount)
        else:
            deposit_id = self.pool.deposit_into_existing(staker, amount, deposit_id)
        self._check_invariants()
        deposit = self.pool.deposit_infos[staker][deposit_id]
        return DepositInfoResponse.from_domain(staker, deposit_id, deposit)

    def withdraw(self, staker: str, amount: float, deposit_id: int) -> WithdrawResponse:
        result = self.pool.withdraw_tokens(staker, amount, deposit_id)
        self._check_invariants()
        return WithdrawResponse.from_result(result)

    def get_user(self, staker: str) -> UserInfoResponse:
        user = self.pool.get_user_info(staker)
        if user is None:
            raise StakerNotFoundError(staker)
        slots = self.pool.deposit_infos.get(staker, {})
        deposits = [
            DepositInfoResponse.from_domain(staker, deposit_id, slots[deposit_id])
            for deposit_id in sorted(slots)
        ]
        return UserInfoResponse.from_domain(staker, user, deposits)

    def pending_reward(self, staker: str, deposit_id: int) -> PendingRewardResponse:
        now = self.pool.clock.now()
        return PendingRewardResponse(
            staker=staker,
            deposit_id=deposit_id,
            pending_reward=self.pool.pending_reward(staker, deposit_id),
            as_of=now,
        )

    def get_state(self) -> PoolStateResponse:
        return PoolStateResponse.from_snapshot(self.pool.snapshot(), self.pool.clock.now())

    def _check_invariants(self) -> list[str]:
        violations = verify_pool_invariants(self.pool)
        if violations:
            logger.error("Pool invariants violated after mutation: %d", len(violations))
        return violations


def build_pool_from_settings() -> StakingPool:
    """Create the ledgers and the pool described by config.settings."""
    from config.settings import settings

    clock = SystemClock()
    start_time = settings.POOL_START_TIME
    if start_time is None:
        start_time = clock.now()
    pool = StakingPool(
        staked_ledger=Ledger(settings.STAKED_TOKEN_SYMBOL),
        reward_ledger=Ledger(settings.REWARD_TOKEN_SYMBOL),
        reward_per_second=settings.REWARD_PER_SECOND,
        start_time=start_time,
        end_time=start_time + settings.POOL_DURATION,
        lock_duration=settings.LOCK_DURATION,
        clock=clock,
    )
    if settings.INITIAL_REWARD_TOKENS > 0:
        pool.add_reward_tokens(settings.INITIAL_REWARD_TOKENS)
    logger.info(
        "Pool window [%d, %d], lock %ds, %s reward/s",
        pool.start_time,
        pool.end_time,
        pool.lock_duration,
        pool.reward_per_second,
    )
    return pool


_service: StakingApplicationService | None = None


def get_staking_service() -> StakingApplicationService:
    """FastAPI dependency: the process-wide service, created on first use."""
    global _service  # noqa: PLW0603
    if _service is None:
        _service = StakingApplicationService(build_pool_from_settings())
    return _service
