from src.sp_common.errors import DepositFrozenError, WithdrawFrozenError


def check_deposit_open(paused: bool) -> None:
    if paused:
        raise DepositFrozenError()


def check_withdraw_open(paused: bool) -> None:
    if paused:
        raise WithdrawFrozenError()
