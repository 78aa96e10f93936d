"""Unified error codes and custom exceptions.

Error code ranges:
  1xxx: Ledger
  2xxx: Staking pool
  9xxx: System
"""


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        code: int,
        message: str,
        http_status: int = 500,
    ) -> None:
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)


# --- 1xxx: Ledger ---

class InvalidAmountError(AppError):
    def __init__(self) -> None:
        super().__init__(1001, "Invalid amount", 422)


class InsufficientBalanceError(AppError):
    def __init__(self, required: float | None = None, available: float | None = None) -> None:
        message = "Insufficient balance"
        if required is not None and available is not None:
            message = f"Insufficient balance: required {required}, available {available}"
        super().__init__(1002, message, 422)


# --- 2xxx: Staking pool ---

class DepositFrozenError(AppError):
    def __init__(self) -> None:
        super().__init__(2001, "Deposit is frozen", 423)


class WithdrawFrozenError(AppError):
    def __init__(self) -> None:
        super().__init__(2002, "Withdraw is frozen", 423)


class InvalidTimeError(AppError):
    def __init__(self, now: int, start_time: int, end_time: int) -> None:
        super().__init__(
            2003,
            f"Invalid time: {now} is outside the mining window [{start_time}, {end_time}]",
            422,
        )


class AmountTooHighError(AppError):
    def __init__(self, requested: float, deposited: float) -> None:
        super().__init__(
            2004,
            f"Amount to withdraw too high: requested {requested}, deposited {deposited}",
            422,
        )


class InvalidTimeToWithdrawError(AppError):
    def __init__(self, lock_to: int) -> None:
        super().__init__(2005, f"Invalid time to withdraw: locked until {lock_to}", 422)


class InsufficientRewardSupplyError(AppError):
    def __init__(self, required: float, available: float) -> None:
        super().__init__(
            2006,
            f"Not enough reward tokens: required {required}, available {available}",
            422,
        )


class DepositNotFoundError(AppError):
    def __init__(self, staker: str, deposit_id: int) -> None:
        super().__init__(2007, f"Deposit not found: {staker}#{deposit_id}", 404)


class StakerNotFoundError(AppError):
    def __init__(self, staker: str) -> None:
        super().__init__(2008, f"Staker not found: {staker}", 404)


class ReservedAccountError(AppError):
    def __init__(self, account: str) -> None:
        super().__init__(2009, f"Account is reserved for the pool: {account}", 422)


# --- 9xxx: System ---

class AdminRequiredError(AppError):
    def __init__(self) -> None:
        super().__init__(9003, "Admin key required", 403)
