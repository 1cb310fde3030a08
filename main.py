# -*- coding: utf-8 -*-
"""
Interactive Bank Account Session

Purpose:
- Creates one account from a user-entered opening balance.
- Attaches a TransactionLogger and wraps the account in LimitedAccount.
- Performs one deposit and one withdrawal, then reports the final balance.

Outputs:
- One "Transaction Log:" line per successful transaction (stdout).
- The final balance, or the first error encountered (stderr).
"""


from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Callable, Optional, TextIO
import logging
import sys

from banking.bank_account import BankAccount
from banking.errors import (
    ErrorKind,
    InvalidAccountOperationError,
    NegativeDepositError,
    OverdrawError,
    kind_of,
)
from banking.limited_account import LimitedAccount
from banking.log import setup_logger
from banking.money import fmt_money, parse_amount
from banking.observer import TransactionLogger
import banking.config as cfg

logger = logging.getLogger(__name__)


class SessionState(Enum):
    AWAITING_INITIAL_BALANCE = "awaiting_initial_balance"
    AWAITING_DEPOSIT = "awaiting_deposit"
    AWAITING_WITHDRAWAL = "awaiting_withdrawal"
    REPORTING = "reporting"
    DONE = "done"
    FAILED = "failed"


@dataclass
class SessionResult:
    state: SessionState
    balance: Optional[Decimal] = None
    error_kind: Optional[ErrorKind] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.error_kind is None


# ---------- Session ----------
def run_session(read_line: Callable[[str], str] = input,
                out: Optional[TextIO] = None,
                err: Optional[TextIO] = None) -> SessionResult:
    """
    Run one pass: opening balance -> deposit -> withdrawal -> report.

    The first failure stops the pass; its kind and message are returned
    alongside the balance as it stood when the failure happened.
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    state = SessionState.AWAITING_INITIAL_BALANCE
    account: Optional[LimitedAccount] = None

    def _fail(exc: Exception, text: str) -> SessionResult:
        print(text, file=err)
        logger.debug("session failed in %s: %r", state.value, exc)
        balance = account.get_balance() if account is not None else None
        return SessionResult(SessionState.FAILED, balance, kind_of(exc), str(exc))

    try:
        initial = parse_amount(read_line("Enter initial balance: "))
        base = BankAccount(cfg.DEFAULT_ACCOUNT_NUMBER, initial)
        print(f"Bank Account Created: #{base.account_number}", file=out)

        base.add_observer(TransactionLogger(out))
        account = LimitedAccount(base)

        state = SessionState.AWAITING_DEPOSIT
        account.deposit(parse_amount(read_line("Enter deposit amount: ")))

        state = SessionState.AWAITING_WITHDRAWAL
        account.withdraw(parse_amount(read_line("Enter withdraw amount: ")))

        state = SessionState.REPORTING
        balance = account.get_balance()
        print(f"Final Balance: {fmt_money(balance)}", file=out)
        return SessionResult(SessionState.DONE, balance)
    except NegativeDepositError as e:
        return _fail(e, f"Error: {e}")
    except OverdrawError as e:
        return _fail(e, f"Error: {e}")
    except InvalidAccountOperationError as e:
        return _fail(e, f"Error: {e}")
    except Exception as e:
        return _fail(e, f"An unexpected error occurred: {e}")
    finally:
        out.flush()
        err.flush()


def main() -> None:
    setup_logger("banking", cfg.LOG_LEVEL)
    setup_logger(__name__, cfg.LOG_LEVEL)
    try:
        run_session()
    except KeyboardInterrupt:
        print("\nGoodbye.")


if __name__ == "__main__":
    main()
