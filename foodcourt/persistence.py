"""JSON flat-file persistence, one file per collection."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Any, Iterable

from foodcourt.config import COLLECTION_FILES, DATA_DIR
from foodcourt.errors import StorageError
from foodcourt.models import RECORD_TYPES, Record

logger = logging.getLogger(__name__)


def _dump_value(value: Any) -> str:
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"non-finite number: {value}")
        return str(value)
    return json.dumps(value, ensure_ascii=False, allow_nan=False)


def dump_records(payload: list[dict[str, Any]]) -> str:
    """Indented JSON array of flat objects; Decimal values are written as exact number literals."""
    if not payload:
        return "[]"
    objects = []
    for row in payload:
        members = ",\n".join(
            f"    {json.dumps(key, ensure_ascii=False)}: {_dump_value(value)}" for key, value in row.items()
        )
        objects.append(f"  {{\n{members}\n  }}")
    return "[\n" + ",\n".join(objects) + "\n]"


def _file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class RecordStore:
    """Load and replace whole collections under a data directory.

    A missing file is an empty collection. Anything unreadable raises
    StorageError; there is no repair path.
    """

    def __init__(self, data_dir: str | Path = DATA_DIR) -> None:
        self.data_dir = Path(data_dir)

    def path_for(self, collection: str) -> Path:
        try:
            return self.data_dir / COLLECTION_FILES[collection]
        except KeyError:
            raise StorageError(f"Unknown collection: {collection!r}") from None

    def load(self, collection: str) -> list[Any]:
        """Return the collection's records in file order."""
        path = self.path_for(collection)
        record_type = RECORD_TYPES[collection]
        if not path.exists():
            logger.debug("load collection=%s missing, treating as empty", collection)
            return []

        try:
            with path.open("r", encoding="utf-8") as fh:
                raw = json.load(fh, parse_float=Decimal)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise StorageError(f"Cannot read {path}: {exc}") from exc

        if not isinstance(raw, list):
            raise StorageError(f"Malformed {path}: expected a list of records")
        try:
            records = [record_type.from_record(entry) for entry in raw]
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Malformed {path}: {exc}") from exc

        logger.debug("load collection=%s count=%d", collection, len(records))
        return records

    def save(self, collection: str, records: Iterable[Record]) -> None:
        """Replace the collection file with the given records in one step."""
        path = self.path_for(collection)
        payload = [record.to_record() for record in records]
        try:
            content = dump_records(payload)
        except (TypeError, ValueError) as exc:
            raise StorageError(f"Cannot serialize {collection}: {exc}") from exc

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(content)
                os.chmod(tmp_name, _file_mode())
                os.replace(tmp_name, path)
            except BaseException:
                Path(tmp_name).unlink(missing_ok=True)
                raise
        except OSError as exc:
            raise StorageError(f"Cannot write {path}: {exc}") from exc

        logger.debug("save collection=%s count=%d", collection, len(payload))
