"""Ledger store: the single owner of accounts and trades.

The store holds a :class:`~tradelog.core.models.LedgerState` in memory,
applies create/edit/delete operations, and hands the analytics engine a
filtered slice of trades plus the matching initial balance.  It never
computes statistics itself, and persistence lives in
:mod:`tradelog.ledger.persistence`.

Usage::

    store = LedgerStore()
    acc = store.add_account("Main", AccountType.STANDARD, 1000)
    store.add_trade(TradeInput(date="2024-01-15", timeframe="H1", ...), acc.id)
    stats = compute_stats(store.filtered_trades(), store.dashboard_initial_balance())
"""

from __future__ import annotations

import logging
from typing import Any

from tradelog.core.config import InstrumentConfig
from tradelog.core.enums import AccountType
from tradelog.core.errors import (
    AccountNotFoundError,
    TradeNotFoundError,
    TradeValidationError,
)
from tradelog.core.models import Account, LedgerState, Trade, User

from .entry import TradeInput, build_trade
from .validation import validate_account

logger = logging.getLogger(__name__)

ALL = "all"


class LedgerStore:
    """In-memory ledger of accounts and trades.

    Parameters
    ----------
    state : LedgerState | None
        Initial state, e.g. from :func:`~tradelog.ledger.persistence.load_state`.
    instrument : InstrumentConfig | None
        Pip size and account multipliers used when deriving trade results.
    """

    def __init__(
        self,
        state: LedgerState | None = None,
        *,
        instrument: InstrumentConfig | None = None,
    ) -> None:
        self._state = state if state is not None else LedgerState()
        self._instrument = instrument or InstrumentConfig()

    @property
    def state(self) -> LedgerState:
        return self._state

    @property
    def accounts(self) -> list[Account]:
        return list(self._state.accounts)

    @property
    def trades(self) -> list[Trade]:
        return list(self._state.trades)

    # ------------------------------------------------------------------ #
    # Session                                                              #
    # ------------------------------------------------------------------ #

    def login(self, username: str) -> None:
        username = username.strip()
        if not username:
            raise TradeValidationError(["Username is required."])
        self._state.user = User(username=username)

    def logout(self) -> None:
        self._state.user = None

    # ------------------------------------------------------------------ #
    # Accounts                                                             #
    # ------------------------------------------------------------------ #

    def get_account(self, account_id: str) -> Account:
        for acc in self._state.accounts:
            if acc.id == account_id:
                return acc
        raise AccountNotFoundError(account_id)

    def add_account(
        self,
        name: str,
        account_type: AccountType | str,
        initial_balance: Any,
    ) -> Account:
        check = validate_account(name, account_type, initial_balance)
        if not check.valid:
            raise TradeValidationError(check.errors)
        acc = Account(
            name=str(name).strip(),
            account_type=AccountType.parse(account_type),
            initial_balance=initial_balance,
        )
        self._state.accounts.append(acc)
        logger.info("Account created: %s (%s)", acc.id, acc.name)
        return acc

    def update_account(
        self,
        account_id: str,
        name: str,
        account_type: AccountType | str,
        initial_balance: Any,
    ) -> Account:
        """Replace an account's editable fields.

        Existing trade results are not recomputed when the account type
        changes; they keep the value they were saved with.
        """
        current = self.get_account(account_id)
        check = validate_account(name, account_type, initial_balance)
        if not check.valid:
            raise TradeValidationError(check.errors)
        updated = Account(
            id=current.id,
            name=str(name).strip(),
            account_type=AccountType.parse(account_type),
            initial_balance=initial_balance,
            created_at=current.created_at,
        )
        self._state.accounts = [
            updated if a.id == account_id else a for a in self._state.accounts
        ]
        return updated

    def delete_account(self, account_id: str) -> int:
        """Delete an account and all of its trades.

        Returns the number of trades removed with it.
        """
        self.get_account(account_id)
        before = len(self._state.trades)
        self._state.accounts = [a for a in self._state.accounts if a.id != account_id]
        self._state.trades = [t for t in self._state.trades if t.account_id != account_id]
        if self._state.active_account_id == account_id:
            self._state.active_account_id = ALL
        removed = before - len(self._state.trades)
        logger.info("Account deleted: %s (%d trades removed)", account_id, removed)
        return removed

    # ------------------------------------------------------------------ #
    # Trades                                                               #
    # ------------------------------------------------------------------ #

    def get_trade(self, trade_id: str) -> Trade:
        for trade in self._state.trades:
            if trade.id == trade_id:
                return trade
        raise TradeNotFoundError(trade_id)

    def add_trade(self, data: TradeInput, account_id: str) -> Trade:
        account = self.get_account(account_id)
        trade = build_trade(data, account, instrument=self._instrument)
        self._state.trades.append(trade)
        logger.debug("Trade added: %s on %s", trade.id, account_id)
        return trade

    def update_trade(self, trade_id: str, data: TradeInput, account_id: str) -> Trade:
        """Fully replace a trade, keeping its id and ledger position."""
        self.get_trade(trade_id)
        account = self.get_account(account_id)
        trade = build_trade(
            data, account, instrument=self._instrument, trade_id=trade_id
        )
        self._state.trades = [
            trade if t.id == trade_id else t for t in self._state.trades
        ]
        return trade

    def delete_trade(self, trade_id: str) -> None:
        self.get_trade(trade_id)
        self._state.trades = [t for t in self._state.trades if t.id != trade_id]
        logger.debug("Trade deleted: %s", trade_id)

    def trades_for_account(self, account_id: str) -> list[Trade]:
        return [t for t in self._state.trades if t.account_id == account_id]

    # ------------------------------------------------------------------ #
    # Filters and engine inputs                                            #
    # ------------------------------------------------------------------ #

    def set_filters(
        self,
        *,
        account_id: str | None = None,
        account_type: AccountType | str | None = None,
    ) -> None:
        """Set the active account and/or account-type filter.

        ``"all"`` clears a filter.
        """
        if account_type is not None:
            if account_type == ALL:
                self._state.active_type_filter = ALL
            else:
                self._state.active_type_filter = AccountType.parse(account_type).value
        if account_id is not None:
            if account_id != ALL:
                self.get_account(account_id)
            self._state.active_account_id = account_id

    def _type_filtered_accounts(self) -> list[Account]:
        type_filter = self._state.active_type_filter
        if type_filter == ALL:
            return list(self._state.accounts)
        return [a for a in self._state.accounts if a.account_type.value == type_filter]

    def filtered_trades(self) -> list[Trade]:
        """Trades matching the active type filter, then the account filter."""
        trades = self._state.trades
        if self._state.active_type_filter != ALL:
            ids = {a.id for a in self._type_filtered_accounts()}
            trades = [t for t in trades if t.account_id in ids]
        if self._state.active_account_id != ALL:
            trades = [t for t in trades if t.account_id == self._state.active_account_id]
        return list(trades)

    def dashboard_initial_balance(self) -> float:
        """Initial balance matching :meth:`filtered_trades`.

        The sum over the type-filtered accounts when no single account is
        selected; otherwise that account's balance (0 if it vanished).
        """
        if self._state.active_account_id == ALL:
            return sum(a.initial_balance for a in self._type_filtered_accounts())
        for acc in self._state.accounts:
            if acc.id == self._state.active_account_id:
                return acc.initial_balance
        return 0.0

    def display_account_type(self) -> AccountType:
        """Unit to show dashboard amounts in."""
        if self._state.active_type_filter == AccountType.CENT.value:
            return AccountType.CENT
        return AccountType.STANDARD

    # ------------------------------------------------------------------ #
    # Import                                                               #
    # ------------------------------------------------------------------ #

    def replace_state(self, state: LedgerState) -> None:
        """Swap in an imported state, keeping the current session user."""
        user = self._state.user
        self._state = state.model_copy(update={"user": user})
        logger.info(
            "Ledger replaced: %d accounts, %d trades",
            len(state.accounts),
            len(state.trades),
        )
