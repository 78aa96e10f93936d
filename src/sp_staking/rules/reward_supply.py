from src.sp_common.errors import InsufficientRewardSupplyError


def check_reward_supply(required: float, available: float) -> None:
    if available < required:
        raise InsufficientRewardSupplyError(required, available)
