"""
Central Configuration File (SSOT).
"""

# --- Business Rules ---
CURRENCY = "USD"
CURRENCY_SYMBOLS = {
    "GBP": "£",
    "TRY": "₺",
    "USD": "$",
    "EUR": "€",
}
WITHDRAW_LIMIT = "500.00"  # ceiling enforced by LimitedAccount

# --- Driver Settings ---
DEFAULT_ACCOUNT_NUMBER = "123456"
LOG_LABEL = "Transaction Log: "

# Diagnostic logging (transaction log lines are not affected)
LOG_LEVEL: str = "WARNING"
