"""Pool-wide bookkeeping invariants.

INV-1: total_staking_tokens == sum of user total_amount == sum of slot amounts
INV-2: staked ledger balance of the pool account == total_staking_tokens
INV-3: reward ledger balance of the pool account >= total_reward_tokens
INV-4: no slot amount is negative
"""

import logging
import math

from src.sp_staking.domain.pool import StakingPool

logger = logging.getLogger(__name__)

# Float sums of the same deposits in different orders may differ in the last bits.
_REL_TOL = 1e-9
_ABS_TOL = 1e-9


def _close(a: float, b: float) -> bool:
    return math.isclose(a, b, rel_tol=_REL_TOL, abs_tol=_ABS_TOL)


def verify_pool_invariants(pool: StakingPool) -> list[str]:
    """Returns list of violation strings; empty when the pool is consistent."""
    violations: list[str] = []
    total = pool.total_staking_tokens

    user_sum = sum(u.total_amount for u in pool.user_infos.values())
    slot_sum = sum(
        d.amount for slots in pool.deposit_infos.values() for d in slots.values()
    )
    if not (_close(total, user_sum) and _close(total, slot_sum)):
        violations.append(
            f"INV-1 violated: total_staking_tokens({total}) != "
            f"user_totals({user_sum}) / deposit_amounts({slot_sum})"
        )

    staked_balance = pool.staked_ledger.balance_of(pool.account_id)
    if not _close(staked_balance, total):
        violations.append(
            f"INV-2 violated: staked balance of {pool.account_id}({staked_balance}) "
            f"!= total_staking_tokens({total})"
        )

    reward_balance = pool.reward_ledger.balance_of(pool.account_id)
    if reward_balance < pool.total_reward_tokens and not _close(
        reward_balance, pool.total_reward_tokens
    ):
        violations.append(
            f"INV-3 violated: reward balance of {pool.account_id}({reward_balance}) "
            f"< total_reward_tokens({pool.total_reward_tokens})"
        )

    for staker, slots in pool.deposit_infos.items():
        for deposit_id, deposit in slots.items():
            if deposit.amount < 0:
                violations.append(
                    f"INV-4 violated: {staker}#{deposit_id} amount={deposit.amount}"
                )

    for msg in violations:
        logger.error(msg)
    if not violations:
        logger.debug("Invariants OK: total_staking_tokens=%s", total)
    return violations
