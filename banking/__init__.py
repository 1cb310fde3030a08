# -*- coding: utf-8 -*-
"""
Package for an observed bank account with a withdrawal-limit decorator.

This __init__ file sets the global `Decimal` context so every balance and
amount in the package is computed the same way, and re-exports the public
account, observer and error types.
"""
from decimal import getcontext, ROUND_HALF_EVEN

# Banker's rounding minimizes statistical bias.
getcontext().prec = 28
getcontext().rounding = ROUND_HALF_EVEN

from .bank_account import Account, BankAccount  # noqa: E402
from .errors import (  # noqa: E402
    BankingError,
    ErrorKind,
    InvalidAccountOperationError,
    NegativeDepositError,
    OverdrawError,
)
from .limited_account import LimitedAccount  # noqa: E402
from .observer import Observer, TransactionLogger  # noqa: E402

__all__ = [
    "Account",
    "BankAccount",
    "BankingError",
    "ErrorKind",
    "InvalidAccountOperationError",
    "LimitedAccount",
    "NegativeDepositError",
    "Observer",
    "OverdrawError",
    "TransactionLogger",
]
