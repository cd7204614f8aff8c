"""Custom exception hierarchy for the trading journal."""


class TradelogError(Exception):
    """Base exception for all trading journal errors."""


# --- Configuration ---
class ConfigError(TradelogError):
    """Invalid or missing configuration."""


# --- Ledger ---
class LedgerError(TradelogError):
    """Ledger store error."""


class AccountNotFoundError(LedgerError):
    """No account with the requested id."""

    def __init__(self, account_id: str):
        self.account_id = account_id
        super().__init__(f"Account not found: {account_id}")


class TradeNotFoundError(LedgerError):
    """No trade with the requested id."""

    def __init__(self, trade_id: str):
        self.trade_id = trade_id
        super().__init__(f"Trade not found: {trade_id}")


class ImportFormatError(LedgerError):
    """Backup file could not be read or has the wrong structure."""


# --- Validation ---
class TradeValidationError(TradelogError):
    """Account or trade input failed form-level validation."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid input")
