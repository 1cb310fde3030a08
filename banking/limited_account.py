# -*- coding: utf-8 -*-
"""
Limited Account - Withdrawal Ceiling Decorator

- Wraps any Account and exposes the same operations.
- Rejects withdrawals above cfg.WITHDRAW_LIMIT before the wrapped account
  is consulted, so closed/overdraw checks never run in that case.
- Holds no balance of its own; observers registered here land on the
  wrapped account.
"""

from __future__ import annotations

from decimal import Decimal
import logging

import banking.config as cfg
from .bank_account import Account
from .errors import InvalidAccountOperationError
from .money import as_amount, as_money, fmt_money
from .observer import Listener

logger = logging.getLogger(__name__)


class LimitedAccount:
    def __init__(self, account: Account):
        self._wrapped = account

    def __repr__(self) -> str:
        return f"LimitedAccount({self._wrapped!r}, limit={self.limit})"

    @property
    def wrapped(self) -> Account:
        return self._wrapped

    @property
    def limit(self) -> Decimal:
        return as_money(cfg.WITHDRAW_LIMIT)

    @property
    def account_number(self) -> str:
        return self._wrapped.account_number

    @property
    def is_active(self) -> bool:
        return self._wrapped.is_active

    def add_observer(self, observer: Listener) -> None:
        self._wrapped.add_observer(observer)

    def get_balance(self) -> Decimal:
        return self._wrapped.get_balance()

    def deposit(self, amount: Decimal) -> None:
        self._wrapped.deposit(amount)

    def withdraw(self, amount: Decimal) -> None:
        limit = self.limit
        if as_amount(amount) > limit:
            logger.debug("withdrawal of %s over limit %s on %s", amount, limit, self.account_number)
            raise InvalidAccountOperationError(
                f"You are limited to a {fmt_money(limit)} maximum withdraw amount. Please try again"
            )
        self._wrapped.withdraw(amount)

    def close(self) -> None:
        self._wrapped.close()
