from src.sp_common.errors import ReservedAccountError


def check_staker(staker: str, pool_account_id: str) -> None:
    """The pool's own ledger account cannot hold a position."""
    if staker == pool_account_id:
        raise ReservedAccountError(staker)
