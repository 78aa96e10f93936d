from src.sp_common.errors import InvalidTimeToWithdrawError
from src.sp_staking.domain.models import DepositInfo


def check_lock_expired(deposit: DepositInfo, now: int) -> None:
    """The whole principal stays locked until lock_to; there is no partial unlock."""
    if now < deposit.lock_to:
        raise InvalidTimeToWithdrawError(deposit.lock_to)
