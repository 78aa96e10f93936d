"""In-memory token ledger: a balance map with mint and transfer.

Supply only grows through mint(); transfer() conserves it. Balances never go
negative because transfer() checks the sender first and mutates after.
"""

import logging
from collections.abc import Mapping
from types import MappingProxyType

from src.sp_common.amounts import is_positive_amount
from src.sp_common.errors import InsufficientBalanceError, InvalidAmountError

logger = logging.getLogger(__name__)


class Ledger:
    def __init__(self, symbol: str = "") -> None:
        self.symbol = symbol
        self._balances: dict[str, float] = {}

    @property
    def balances(self) -> Mapping[str, float]:
        return MappingProxyType(self._balances)

    @property
    def total_supply(self) -> float:
        return sum(self._balances.values())

    def balance_of(self, account: str) -> float:
        return self._balances.get(account, 0)

    def mint(self, account: str, amount: float) -> None:
        if not is_positive_amount(amount):
            raise InvalidAmountError()
        self._balances[account] = self.balance_of(account) + amount
        logger.debug("Mint %s %s -> %s", amount, self.symbol, account)

    def transfer(self, from_account: str, to_account: str, amount: float) -> None:
        if not is_positive_amount(amount):
            raise InvalidAmountError()
        available = self.balance_of(from_account)
        if available < amount:
            raise InsufficientBalanceError(required=amount, available=available)
        if from_account != to_account:
            self._balances[from_account] = available - amount
            self._balances[to_account] = self.balance_of(to_account) + amount
        logger.debug(
            "Transfer %s %s: %s -> %s", amount, self.symbol, from_account, to_account
        )
