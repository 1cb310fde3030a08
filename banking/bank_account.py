# -*- coding: utf-8 -*-
"""
Bank Account - Observed Subject

- Validate before mutating: a rejected call leaves balance and status untouched.
- Notify observers after every successful deposit, withdrawal or close.
- Closed accounts refuse withdrawals; deposits are still accepted.
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Protocol
import logging

from .errors import InvalidAccountOperationError, NegativeDepositError, OverdrawError
from .money import as_amount, as_money, fmt_money
from .observer import Listener, deliver

logger = logging.getLogger(__name__)


class Account(Protocol):
    """Capability set shared by BankAccount and its decorators."""

    @property
    def account_number(self) -> str: ...

    @property
    def is_active(self) -> bool: ...

    def get_balance(self) -> Decimal: ...

    def deposit(self, amount: Decimal) -> None: ...

    def withdraw(self, amount: Decimal) -> None: ...

    def close(self) -> None: ...

    def add_observer(self, observer: Listener) -> None: ...


class BankAccount:
    def __init__(self, account_number: str, balance: Decimal):
        # negative opening balances are accepted as given
        self._account_number = account_number
        self._balance = as_money(balance)
        self._active = True
        self._observers: List[Listener] = []

    def __repr__(self) -> str:
        return f"BankAccount({self._account_number}, balance={self._balance}, active={self._active})"

    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def is_active(self) -> bool:
        return self._active

    def add_observer(self, observer: Listener) -> None:
        self._observers.append(observer)

    def _notify(self, message: str) -> None:
        for observer in self._observers:
            deliver(observer, message)

    def get_balance(self) -> Decimal:
        return self._balance

    def deposit(self, amount: Decimal) -> None:
        amt = as_amount(amount)
        if amt < 0:
            logger.debug("rejected deposit of %s on %s", amt, self._account_number)
            raise NegativeDepositError("Deposit must be positive")
        self._balance = as_money(self._balance + amt)
        logger.debug("deposit %s on %s -> %s", amt, self._account_number, self._balance)
        self._notify(f"Deposited: {fmt_money(amt)}")

    def withdraw(self, amount: Decimal) -> None:
        amt = as_amount(amount)
        if not self._active:
            logger.debug("rejected withdrawal on closed account %s", self._account_number)
            raise InvalidAccountOperationError("This Account is closed")
        if amt > self._balance:
            logger.debug("rejected withdrawal of %s on %s (balance %s)", amt, self._account_number, self._balance)
            raise OverdrawError(
                f"You cannot withdraw more than your balance. Your balance is {fmt_money(self._balance)}"
            )
        self._balance = as_money(self._balance - amt)
        logger.debug("withdraw %s on %s -> %s", amt, self._account_number, self._balance)
        self._notify(f"Withdrew: {fmt_money(amt)}")

    def close(self) -> None:
        self._active = False
        logger.debug("closed account %s", self._account_number)
        self._notify("Account has been closed")
