"""Global enums."""

from enum import Enum


class TokenKind(str, Enum):
    """Which of the pool's two ledgers an operation targets."""
    STAKED = "staked"
    REWARD = "reward"
