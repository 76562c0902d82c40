"""Read-only store of user fixture records.

The backing file is a JSON list of user objects addressed by position:
index 0 is the account the login scenarios rely on, index 1 is the
account the register scenarios create and delete.
"""

from __future__ import annotations

import json
from pathlib import Path

import structlog
from pydantic import ValidationError

from storefront_e2e.config import get_settings
from storefront_e2e.core.exceptions import FixtureLoadError
from storefront_e2e.models.user import UserRecord

log = structlog.get_logger(__name__)


class FixtureStore:
    """Loads UserRecords from a JSON fixture file.

    Every ``load()`` re-reads the file, so each scenario works on its own
    records and nothing leaks between scenarios.

    Usage:
        store = FixtureStore()
        patrick = store.get(0)
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self.path = Path(path) if path is not None else get_settings().users_fixture_path

    def load(self) -> list[UserRecord]:
        """Load all records in file order.

        Raises:
            FixtureLoadError: If the file is missing, unreadable, or any
                record fails validation.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise FixtureLoadError("fixture file not found", path=self.path) from e
        except OSError as e:
            raise FixtureLoadError(f"cannot read fixture file: {e}", path=self.path) from e

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise FixtureLoadError(f"invalid JSON: {e}", path=self.path) from e

        if not isinstance(payload, list):
            raise FixtureLoadError(
                f"expected a list of user records, got {type(payload).__name__}",
                path=self.path,
            )

        records: list[UserRecord] = []
        for index, item in enumerate(payload):
            try:
                records.append(UserRecord.model_validate(item))
            except ValidationError as e:
                fields = ", ".join(
                    ".".join(str(part) for part in err["loc"]) or "<record>"
                    for err in e.errors()
                )
                raise FixtureLoadError(
                    f"record {index} is invalid ({fields})", path=self.path
                ) from e

        log.debug("fixture_store_loaded", path=str(self.path), count=len(records))
        return records

    def get(self, index: int) -> UserRecord:
        """Return the record at ``index``.

        Raises:
            FixtureLoadError: If loading fails or ``index`` is out of range.
        """
        records = self.load()
        if not 0 <= index < len(records):
            raise FixtureLoadError(
                f"no user record at index {index} ({len(records)} available)",
                path=self.path,
            )
        return records[index]
