"""CLI entry point for the trading journal."""

from __future__ import annotations

import json
from contextlib import contextmanager
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterator

import click

from .analytics import compute_stats, period_performance
from .core.config import Settings, load_settings
from .core.enums import AccountType, Direction, Period
from .core.errors import ConfigError, TradelogError
from .ledger import (
    ALL,
    LedgerStore,
    TradeInput,
    export_backup,
    import_backup,
    load_state,
    save_state,
)
from .observability.logger import get_logger, new_run_id, setup_logging
from .reporting import account_cards, dashboard_summary, format_currency, trade_row

logger = get_logger(__name__)


@dataclass
class _AppContext:
    settings: Settings
    store: LedgerStore
    state_path: Path

    def save(self) -> None:
        save_state(self.store.state, self.state_path)


@contextmanager
def _errors() -> Iterator[None]:
    try:
        yield
    except TradelogError as exc:
        raise click.ClickException(str(exc)) from exc


_pass_app = click.make_pass_decorator(_AppContext)


@click.group()
@click.option("--config", "config_path", default=None, help="Config file path (TOML)")
@click.option("--state", "state_path", default=None, help="Ledger state file override")
@click.pass_context
def main(ctx: click.Context, config_path: str | None, state_path: str | None) -> None:
    """Trading journal: record trades and review performance."""
    try:
        settings = load_settings(config_path)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    setup_logging(settings.observability.log_level, settings.observability.log_format)
    new_run_id()

    path = Path(state_path or settings.ledger.state_path)
    store = LedgerStore(load_state(path), instrument=settings.instrument)
    ctx.obj = _AppContext(settings=settings, store=store, state_path=path)


# ---------------------------------------------------------------------------
# Session
# ---------------------------------------------------------------------------

@main.command()
@click.argument("username")
@_pass_app
def login(app: _AppContext, username: str) -> None:
    """Start a session as USERNAME."""
    with _errors():
        app.store.login(username)
    app.save()
    click.echo(f"Logged in as {username.strip()}.")


@main.command()
@_pass_app
def logout(app: _AppContext) -> None:
    """End the current session."""
    app.store.logout()
    app.save()
    click.echo("Logged out.")


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------

@main.group()
def account() -> None:
    """Manage trading accounts."""


@account.command("add")
@click.option("--name", required=True, help="Account name")
@click.option(
    "--type", "account_type",
    type=click.Choice([t.value for t in AccountType]),
    default=AccountType.STANDARD.value,
    help="Account type",
)
@click.option("--balance", type=float, default=0.0, help="Initial balance")
@_pass_app
def account_add(app: _AppContext, name: str, account_type: str, balance: float) -> None:
    """Create an account."""
    with _errors():
        acc = app.store.add_account(name, account_type, balance)
    app.save()
    click.echo(acc.id)


@account.command("list")
@_pass_app
def account_list(app: _AppContext) -> None:
    """Show every account with its own statistics."""
    cards = account_cards(app.store)
    if not cards:
        click.echo("No accounts yet.")
        return
    for card in cards:
        acc, s = card.account, card.stats
        click.echo(
            f"{acc.id}  {acc.name:<20s} {acc.account_type.value:<8s} "
            f"start {format_currency(acc.initial_balance, acc.account_type):>14s}  "
            f"now {format_currency(s.balance, acc.account_type):>14s}  "
            f"{s.growth:+.2f}%  {s.total} trades  WR {s.win_rate:.1f}%"
        )


@account.command("delete")
@click.argument("account_id")
@click.confirmation_option(prompt="Delete this account and all of its trades?")
@_pass_app
def account_delete(app: _AppContext, account_id: str) -> None:
    """Delete ACCOUNT_ID and its trades."""
    with _errors():
        removed = app.store.delete_account(account_id)
    app.save()
    click.echo(f"Deleted account {account_id} ({removed} trades).")


# ---------------------------------------------------------------------------
# Trades
# ---------------------------------------------------------------------------

@main.group()
def trade() -> None:
    """Record and review trades."""


@trade.command("add")
@click.option("--account", "account_id", required=True, help="Account id")
@click.option("--date", "trade_date", required=True, help="Trade date (YYYY-MM-DD)")
@click.option("--pair", default="XAUUSD", help="Instrument")
@click.option("--tf", "timeframe", required=True, help="Timeframe, e.g. M15")
@click.option(
    "--dir", "direction",
    type=click.Choice([d.value for d in Direction]),
    default=Direction.BUY.value,
)
@click.option("--lot", type=float, required=True)
@click.option("--entry", type=float, required=True)
@click.option("--close", type=float, default=None, help="Close price (omit for an open trade)")
@click.option("--sl", "stop_loss", type=float, default=None)
@click.option("--tp", "take_profit", type=float, default=None)
@click.option("--result", type=float, default=None, help="Monetary result")
@click.option("--manual", "is_manual_result", is_flag=True, help="Keep --result as given")
@click.option("--risk", type=float, default=None)
@click.option("--emotion", default="")
@click.option("--notes", default="")
@_pass_app
def trade_add(
    app: _AppContext,
    account_id: str,
    trade_date: str,
    pair: str,
    timeframe: str,
    direction: str,
    lot: float,
    entry: float,
    close: float | None,
    stop_loss: float | None,
    take_profit: float | None,
    result: float | None,
    is_manual_result: bool,
    risk: float | None,
    emotion: str,
    notes: str,
) -> None:
    """Record a trade."""
    data = TradeInput(
        date=trade_date,
        pair=pair,
        timeframe=timeframe,
        direction=direction,
        lot=lot,
        entry=entry,
        close=close,
        stop_loss=stop_loss,
        take_profit=take_profit,
        result=result,
        is_manual_result=is_manual_result,
        risk=risk,
        emotion=emotion,
        notes=notes,
    )
    with _errors():
        t = app.store.add_trade(data, account_id)
    app.save()
    click.echo(f"{t.id}  pips {t.pips:+.1f}  result {t.result:+.2f}")


@trade.command("list")
@click.option("--account", "account_id", default=None, help="Only this account")
@click.option("--limit", type=int, default=20, help="Most recent N trades")
@_pass_app
def trade_list(app: _AppContext, account_id: str | None, limit: int) -> None:
    """List trades, newest first."""
    store = app.store
    with _errors():
        if account_id:
            store.get_account(account_id)
            trades = store.trades_for_account(account_id)
        else:
            trades = store.trades
    units = {a.id: a.account_type for a in store.accounts}
    trades = sorted(trades, key=lambda t: t.date.isoformat() if t.date else "", reverse=True)
    if not trades:
        click.echo("No trades yet.")
        return
    for t in trades[:limit]:
        row = trade_row(t, units.get(t.account_id, AccountType.STANDARD))
        click.echo(
            f"{row['id']}  {row['date']:<10s} {row['pair']:<7s} {row['direction']:<4s} "
            f"lot {row['lot']:<6g} {row['pips']:>8s} pips  RR {row['risk_reward']:<10s} "
            f"{row['result']:>14s}"
        )


@trade.command("delete")
@click.argument("trade_id")
@_pass_app
def trade_delete(app: _AppContext, trade_id: str) -> None:
    """Delete TRADE_ID."""
    with _errors():
        app.store.delete_trade(trade_id)
    app.save()
    click.echo(f"Deleted trade {trade_id}.")


# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------

def _apply_filters(app: _AppContext, account_id: str | None, account_type: str | None) -> None:
    if account_id is None and account_type is None:
        return
    with _errors():
        app.store.set_filters(account_id=account_id, account_type=account_type)
    app.save()


_type_choice = click.Choice([ALL] + [t.value for t in AccountType])


@main.command()
@click.option("--account", "account_id", default=None, help="Account id or 'all'")
@click.option("--type", "account_type", type=_type_choice, default=None)
@click.option("--json", "as_json", is_flag=True, help="Machine-readable output")
@_pass_app
def stats(
    app: _AppContext,
    account_id: str | None,
    account_type: str | None,
    as_json: bool,
) -> None:
    """Performance summary for the active filters."""
    _apply_filters(app, account_id, account_type)
    store = app.store
    result = compute_stats(store.filtered_trades(), store.dashboard_initial_balance())
    logger.debug("stats computed", trades=result.total)

    if as_json:
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    summary = dashboard_summary(result, store.display_account_type())
    click.echo(f"\n{'=' * 40}")
    click.echo("PERFORMANCE SUMMARY")
    click.echo(f"{'=' * 40}")
    for label, key in (
        ("Balance", "balance"),
        ("Growth", "growth"),
        ("Win rate", "win_rate"),
        ("Trades", "trades"),
        ("Max drawdown", "drawdown"),
        ("Profit factor", "profit_factor"),
        ("Avg R:R", "avg_risk_reward"),
        ("Max win streak", "max_win_streak"),
        ("Max loss streak", "max_loss_streak"),
    ):
        click.echo(f"  {label:18s}: {summary[key]:>16s}")
    click.echo(f"{'=' * 40}\n")


@main.command()
@click.option(
    "--period",
    type=click.Choice([p.value for p in Period]),
    default=Period.MONTHLY.value,
)
@click.option("--account", "account_id", default=None, help="Account id or 'all'")
@click.option("--type", "account_type", type=_type_choice, default=None)
@click.option("--json", "as_json", is_flag=True, help="Machine-readable output")
@_pass_app
def monthly(
    app: _AppContext,
    period: str,
    account_id: str | None,
    account_type: str | None,
    as_json: bool,
) -> None:
    """Net result and win rate per period."""
    _apply_filters(app, account_id, account_type)
    rows = period_performance(app.store.filtered_trades(), period)

    if as_json:
        click.echo(json.dumps([asdict(r) for r in rows], indent=2))
        return
    if not rows:
        click.echo("No trades yet.")
        return
    unit = app.store.display_account_type()
    click.echo(f"  {'Period':<10} {'Trades':>7} {'Result':>16} {'WinRate':>8}")
    click.echo(f"  {'-' * 44}")
    for r in rows:
        click.echo(
            f"  {r.period:<10} {r.trade_count:>7} "
            f"{format_currency(r.net_result, unit):>16} {r.win_rate:>7.1f}%"
        )


# ---------------------------------------------------------------------------
# Backup
# ---------------------------------------------------------------------------

@main.command("export")
@click.argument("directory", required=False)
@_pass_app
def export_cmd(app: _AppContext, directory: str | None) -> None:
    """Write a dated JSON backup into DIRECTORY."""
    path = export_backup(app.store.state, directory or app.settings.ledger.backup_dir)
    click.echo(str(path))


@main.command("import")
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.confirmation_option(prompt="Replace the current ledger with this backup?")
@_pass_app
def import_cmd(app: _AppContext, file: str) -> None:
    """Replace the ledger with the contents of a backup FILE."""
    with _errors():
        state = import_backup(file)
    app.store.replace_state(state)
    app.save()
    click.echo(
        f"Imported {len(state.accounts)} accounts and {len(state.trades)} trades."
    )
