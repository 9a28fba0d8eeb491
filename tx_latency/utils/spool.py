"""
Record Spool

Local JSONL log of measurement records that could not be delivered to the
storage backend, so they can be backfilled later.
"""

import json
from pathlib import Path


class RecordSpool:
    """Append-only JSONL spool for undelivered records."""

    def __init__(self, spool_dir: str = "data/spool", name: str = "undelivered"):
        self.spool_dir = Path(spool_dir)
        self.spool_dir.mkdir(parents=True, exist_ok=True)
        self.name = name

    @property
    def path(self) -> Path:
        return self.spool_dir / f"{self.name}.jsonl"

    def append(self, row: dict):
        """Append one record row."""
        with open(self.path, "a") as f:
            f.write(json.dumps(row) + "\n")

    def read(self, limit: int = 1000) -> list:
        """Read up to 'limit' rows from the end of the spool."""
        if not self.path.exists():
            return []
        with open(self.path, "r") as f:
            lines = f.readlines()
        return [json.loads(x) for x in lines[-limit:]]
