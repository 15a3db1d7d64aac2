"""JSON-file-backed table store with explicit transaction scopes.

The whole data file is one document holding a list of rows per table
plus an identity sequence per table. A transaction loads the document,
hands it to the repositories, and writes it back only when the block
exits normally. Any exception leaves the file untouched.

Transactions hold an exclusive ``flock`` on a sidecar ``.lock`` file from
load to write-back, so they are serialized across processes as well as
threads. The write-back goes to a temporary file that replaces the data
file in one step; readers never see a half-written document.
"""

from __future__ import annotations

import fcntl
import json
import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)

TABLES = ("product", "member", "cart")


class Transaction:
    """The working copy of the document for one logical operation."""

    def __init__(self, document: dict) -> None:
        self._document = document

    @property
    def document(self) -> dict:
        return self._document

    def rows(self, table: str) -> list[dict]:
        return self._document[table]

    def insert(self, table: str, row: dict) -> int:
        """Append a row under a freshly generated ID and return the ID."""
        new_id = self._document["sequence"][table] + 1
        self._document["sequence"][table] = new_id
        self._document[table].append({"id": new_id, **row})
        return new_id


class JsonStore:

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock_path = file_path.with_name(file_path.name + ".lock")
        self._tmp_path = file_path.with_name(file_path.name + ".tmp")
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

    @contextmanager
    def transaction(self) -> Iterator[Transaction]:
        with self._locked():
            self._ensure_file()
            tx = Transaction(self._load_raw())
            try:
                yield tx
            except Exception:
                logger.debug("Rolled back transaction on %s", self._file_path)
                raise
            self._persist_raw(tx.document)

    @contextmanager
    def _locked(self) -> Iterator[None]:
        # Each call opens its own descriptor, so threads of one process
        # contend for the lock just like separate processes do.
        with open(self._lock_path, "a", encoding="utf-8") as fh:
            fcntl.flock(fh.fileno(), fcntl.LOCK_EX)
            try:
                yield
            finally:
                fcntl.flock(fh.fileno(), fcntl.LOCK_UN)

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> dict:
        document = json.loads(self._file_path.read_text(encoding="utf-8"))
        sequence = document.setdefault("sequence", {})
        for table in TABLES:
            document.setdefault(table, [])
            sequence.setdefault(
                table, max((row["id"] for row in document[table]), default=0)
            )
        return document

    def _persist_raw(self, document: dict) -> None:
        self._tmp_path.write_text(
            json.dumps(document, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        os.replace(self._tmp_path, self._file_path)

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._persist_raw(
                {"sequence": {table: 0 for table in TABLES}, **{t: [] for t in TABLES}}
            )
