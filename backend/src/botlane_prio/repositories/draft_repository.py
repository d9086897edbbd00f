"""DuckDB-based storage for saved drafts."""

import logging
import threading
import uuid
from datetime import datetime, timezone
from pathlib import Path

import duckdb
import pandas as pd

from botlane_prio.models.drafts import DRAFT_FIELDS, REQUIRED_DRAFT_FIELDS, Draft

logger = logging.getLogger(__name__)

_SCHEMA = """
    CREATE TABLE IF NOT EXISTS drafts (
        id VARCHAR PRIMARY KEY,
        name VARCHAR NOT NULL,
        adc_champion VARCHAR NOT NULL,
        ally_support VARCHAR,
        enemy_adc VARCHAR,
        enemy_support VARCHAR,
        enemy_threat VARCHAR,
        notes VARCHAR,
        created_at TIMESTAMP NOT NULL,
        updated_at TIMESTAMP NOT NULL
    )
"""


def _utcnow() -> datetime:
    # Stored as naive UTC in a TIMESTAMP column
    return datetime.now(timezone.utc).replace(tzinfo=None)


class DraftRepository:
    """Data access layer for saved draft configurations.

    Each method is a single-record operation. One connection is shared and
    guarded by a lock, since an in-memory database only exists on the
    connection that created it.
    """

    def __init__(self, database_path: str = ":memory:"):
        """Open (or create) the draft database.

        Args:
            database_path: DuckDB file path, or ":memory:" for a throwaway store
        """
        if database_path != ":memory:":
            Path(database_path).parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._conn = duckdb.connect(database_path)
        self._conn.execute(_SCHEMA)
        logger.info(f"DraftRepository: Using {database_path}")

    def close(self) -> None:
        with self._lock:
            self._conn.close()

    def _query(self, sql: str, params: list | None = None) -> list[dict]:
        """Execute query and return list of dicts with NULLs as None."""
        with self._lock:
            df = self._conn.execute(sql, params or []).df()

        # NaN/NaT -> None so optional columns round-trip as missing
        df = df.astype(object).where(df.notna(), None)
        return df.to_dict(orient="records")

    def list_drafts(self) -> list[Draft]:
        """All drafts, newest first."""
        rows = self._query("SELECT * FROM drafts ORDER BY created_at DESC")
        return [_row_to_draft(row) for row in rows]

    def get_draft(self, draft_id: str) -> Draft | None:
        rows = self._query("SELECT * FROM drafts WHERE id = ?", [draft_id])
        return _row_to_draft(rows[0]) if rows else None

    def create_draft(self, fields: dict) -> Draft:
        """Insert a draft with a server-assigned id and timestamps.

        Raises:
            ValueError: If a field is unknown or a required field is empty
        """
        values = _clean_fields(fields)
        missing = [name for name in REQUIRED_DRAFT_FIELDS if not values.get(name)]
        if missing:
            raise ValueError(f"Missing required draft fields: {', '.join(missing)}")

        now = _utcnow()
        row = {name: values.get(name) for name in DRAFT_FIELDS}
        row.update(id=str(uuid.uuid4()), created_at=now, updated_at=now)

        columns = list(row)
        placeholders = ", ".join("?" for _ in columns)
        with self._lock:
            self._conn.execute(
                f"INSERT INTO drafts ({', '.join(columns)}) VALUES ({placeholders})",
                [row[column] for column in columns],
            )
        return _row_to_draft(row)

    def update_draft(self, draft_id: str, fields: dict) -> Draft | None:
        """Apply a partial update.

        Returns:
            Updated draft, or None if no draft has this id

        Raises:
            ValueError: If a field is unknown or a required field would be emptied
        """
        values = _clean_fields(fields)
        emptied = [name for name in REQUIRED_DRAFT_FIELDS if name in values and not values[name]]
        if emptied:
            raise ValueError(f"Required draft fields cannot be empty: {', '.join(emptied)}")

        values["updated_at"] = _utcnow()
        assignments = ", ".join(f"{column} = ?" for column in values)
        with self._lock:
            updated = self._conn.execute(
                f"UPDATE drafts SET {assignments} WHERE id = ? RETURNING id",
                [*values.values(), draft_id],
            ).fetchall()
        if not updated:
            return None
        return self.get_draft(draft_id)

    def delete_draft(self, draft_id: str) -> bool:
        """Delete a draft. Returns False when no draft has this id."""
        with self._lock:
            deleted = self._conn.execute(
                "DELETE FROM drafts WHERE id = ? RETURNING id", [draft_id]
            ).fetchall()
        return bool(deleted)


def _clean_fields(fields: dict) -> dict:
    """Reject fields a client may not set. Values are stored as given."""
    unknown = sorted(set(fields) - set(DRAFT_FIELDS))
    if unknown:
        raise ValueError(f"Unknown draft fields: {', '.join(unknown)}")
    return dict(fields)


def _row_to_draft(row: dict) -> Draft:
    return Draft(
        id=row["id"],
        name=row["name"],
        adc_champion=row["adc_champion"],
        ally_support=row.get("ally_support"),
        enemy_adc=row.get("enemy_adc"),
        enemy_support=row.get("enemy_support"),
        enemy_threat=row.get("enemy_threat"),
        notes=row.get("notes"),
        created_at=_to_datetime(row["created_at"]),
        updated_at=_to_datetime(row["updated_at"]),
    )


def _to_datetime(value) -> datetime:
    if isinstance(value, pd.Timestamp):
        return value.to_pydatetime()
    return value
