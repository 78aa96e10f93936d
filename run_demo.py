"""In-process walkthrough of one stake/unstake cycle.

Run with: python run_demo.py

Uses a FrozenClock, so the 3 second lock passes instantly.
"""

import logging

from src.sp_common.clock import FrozenClock, SystemClock
from src.sp_ledger.domain.ledger import Ledger
from src.sp_staking.domain.pool import StakingPool

USER_ID = "Ux123"
STAKE_AMOUNT = 1000


def section(title: str) -> None:
    print(f"\n{'='*60}")
    print(f"### {title} ###")
    print('='*60)


def show(pool: StakingPool, usd: Ledger, eth: Ledger) -> None:
    print("userInfos:", pool.user_infos[USER_ID])
    print("depositInfos:", pool.deposit_infos[USER_ID][0])
    print("userStake:", usd.balance_of(USER_ID))
    print("userReward:", eth.balance_of(USER_ID))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    usd = Ledger("USD")
    usd.mint(USER_ID, STAKE_AMOUNT)
    eth = Ledger("ETH")

    clock = FrozenClock(SystemClock().now())
    start = clock.now()
    pool = StakingPool(usd, eth, 0.1, start, start + 3, 3, clock=clock)
    pool.add_reward_tokens(100)

    section("Deposit")
    pool.deposit_tokens(USER_ID, STAKE_AMOUNT)
    show(pool, usd, eth)

    print("\nAdvancing the clock 3 seconds")
    clock.advance(3)

    section("Withdraw")
    pool.withdraw_tokens(USER_ID, STAKE_AMOUNT, 0)
    show(pool, usd, eth)

    print("\nDONE")


if __name__ == "__main__":
    main()
