"""Admin application service: pause switch, reward top-ups, invariant audit."""
import logging
from typing import Any

from src.sp_staking.application.service import StakingApplicationService
from src.sp_staking.domain.invariants import verify_pool_invariants

logger = logging.getLogger(__name__)


class AdminService:
    def __init__(self, staking: StakingApplicationService) -> None:
        self._staking = staking

    def set_paused(self, paused: bool) -> dict[str, Any]:
        self._staking.pool.pause(paused)
        return {"paused": self._staking.pool.paused}

    def add_reward_tokens(self, amount: float) -> dict[str, Any]:
        pool = self._staking.pool
        pool.add_reward_tokens(amount)
        return {
            "added": amount,
            "total_reward_tokens": pool.total_reward_tokens,
        }

    def check_invariants(self) -> dict[str, Any]:
        violations = verify_pool_invariants(self._staking.pool)
        if violations:
            logger.warning("Invariant audit found %d violation(s)", len(violations))
        return {"ok": not violations, "violations": violations}
