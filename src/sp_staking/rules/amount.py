from src.sp_common.amounts import is_positive_amount
from src.sp_common.errors import AmountTooHighError, InvalidAmountError
from src.sp_staking.domain.models import DepositInfo


def check_amount(amount: float) -> None:
    if not is_positive_amount(amount):
        raise InvalidAmountError()


def check_withdrawable(deposit: DepositInfo | None, amount: float) -> DepositInfo:
    """Return the slot if it holds at least `amount`. A missing slot counts as empty."""
    deposited = deposit.amount if deposit is not None else 0
    if deposit is None or deposited < amount:
        raise AmountTooHighError(amount, deposited)
    return deposit
