"""Token amount utilities.

Amounts are plain numbers (int or float). Reward payouts are rounded to
REWARD_DECIMALS places before they leave the pool, which absorbs the
floating-point noise of the per-share arithmetic.
"""

import math

REWARD_DECIMALS = 4
_REWARD_SCALE = 10**REWARD_DECIMALS


def is_positive_amount(amount: float) -> bool:
    """True for finite amounts strictly above zero. NaN and inf are rejected."""
    return math.isfinite(amount) and amount > 0


def round_reward(amount: float) -> float:
    """Round to 4 decimal places, halves away from zero for positive values.

    183.33333333 -> 183.3333, 0.00005 -> 0.0001
    """
    return math.floor(amount * _REWARD_SCALE + 0.5) / _REWARD_SCALE


def format_amount(amount: float) -> str:
    """Display string with thousands separators: 1234.5 -> '1,234.5', 1000 -> '1,000'."""
    if float(amount).is_integer():
        return f"{int(amount):,}"
    return f"{amount:,.{REWARD_DECIMALS}f}".rstrip("0").rstrip(".")
