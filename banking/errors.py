# -*- coding: utf-8 -*-
"""
Custom Exception Classes for Banking Domain.

Purpose:
- Give every rejected account operation its own exception type.
- Tag each type with an ErrorKind so the driver (and tests) can inspect
  the kind of failure without string matching.
- Unknown failures (bad input, closed streams) map to ErrorKind.UNEXPECTED.
"""

from enum import Enum


class ErrorKind(Enum):
    NEGATIVE_DEPOSIT = "negative_deposit"
    OVERDRAW = "overdraw"
    INVALID_OPERATION = "invalid_operation"
    UNEXPECTED = "unexpected"


class BankingError(Exception):
    """Base class for account rule violations."""
    kind = ErrorKind.UNEXPECTED


class NegativeDepositError(BankingError):
    """
    Raised when a deposit amount is below zero.
    A zero deposit is accepted.
    """
    kind = ErrorKind.NEGATIVE_DEPOSIT


class OverdrawError(BankingError):
    """
    Raised when a withdrawal asks for more than the current balance.
    """
    kind = ErrorKind.OVERDRAW


class InvalidAccountOperationError(BankingError):
    """
    Raised when an operation is not allowed on this account:
    - Withdrawal from a closed account.
    - Withdrawal above the configured ceiling (LimitedAccount).
    """
    kind = ErrorKind.INVALID_OPERATION


def kind_of(exc: BaseException) -> ErrorKind:
    """Map any exception to its ErrorKind; non-domain errors are UNEXPECTED."""
    if isinstance(exc, BankingError):
        return exc.kind
    return ErrorKind.UNEXPECTED
