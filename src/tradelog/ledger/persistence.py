"""Load, save, back up and import the ledger state document.

The state is one JSON object (accounts, trades, filters, session user)
using the journal's original camelCase field names, so backups from any
version of the journal can be imported.

Loading is forgiving: a missing, unreadable or corrupt file yields an
empty ledger and a warning.  Importing is strict: a backup that does not
parse or lacks the ``accounts``/``trades`` lists is rejected.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path

from pydantic import ValidationError

from tradelog.core.errors import ImportFormatError
from tradelog.core.file_io import atomic_write_text
from tradelog.core.models import LedgerState

logger = logging.getLogger(__name__)

BACKUP_PREFIX = "tradelog_backup_"


def dumps_state(state: LedgerState, *, indent: int = 2) -> str:
    return json.dumps(state.to_json_dict(), indent=indent, ensure_ascii=False)


def load_state(path: str | Path) -> LedgerState:
    """Read the state document, falling back to an empty ledger."""
    path = Path(path)
    if not path.exists():
        return LedgerState()
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError("state document is not a JSON object")
        state = LedgerState.model_validate(raw)
    except (OSError, ValueError, ValidationError) as exc:
        logger.warning("Ledger load failed, starting empty: %s (%s)", path, exc)
        return LedgerState()
    logger.debug(
        "Ledger loaded: %s (%d accounts, %d trades)",
        path,
        len(state.accounts),
        len(state.trades),
    )
    return state


def save_state(state: LedgerState, path: str | Path) -> None:
    atomic_write_text(Path(path), dumps_state(state))
    logger.debug("Ledger saved: %s", path)


def export_backup(
    state: LedgerState,
    directory: str | Path,
    *,
    today: date | None = None,
) -> Path:
    """Write ``tradelog_backup_YYYY-MM-DD.json`` into *directory*."""
    stamp = (today or date.today()).isoformat()
    path = Path(directory) / f"{BACKUP_PREFIX}{stamp}.json"
    atomic_write_text(path, dumps_state(state))
    logger.info("Backup exported: %s", path)
    return path


def import_backup(path: str | Path) -> LedgerState:
    """Parse a backup file.

    Raises:
        ImportFormatError: The file cannot be read or parsed, or it is
            missing the ``accounts``/``trades`` lists.
    """
    path = Path(path)
    if path.suffix.lower() != ".json":
        raise ImportFormatError("Please select a valid JSON file.")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ImportFormatError(f"File read error: {exc}") from exc
    except ValueError as exc:
        raise ImportFormatError("Failed to parse JSON file.") from exc

    if (
        not isinstance(raw, dict)
        or not isinstance(raw.get("accounts"), list)
        or not isinstance(raw.get("trades"), list)
    ):
        raise ImportFormatError("Invalid backup file structure.")

    try:
        return LedgerState.model_validate(raw)
    except ValidationError as exc:
        raise ImportFormatError(f"Invalid backup file structure: {exc}") from exc
