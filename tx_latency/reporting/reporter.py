"""
Reporter

Encodes each measurement as a parquet file and uploads it to the configured
backend. Delivery failures never propagate: the record is printed (and
optionally spooled locally) instead, so no measurement is silently lost.
"""

from pathlib import Path
from typing import Optional

from tx_latency.core.config import UploadConfig
from tx_latency.core.outcome import Outcome
from tx_latency.reporting.parquet import make_parquet_file
from tx_latency.reporting.record import MeasurementRecord
from tx_latency.reporting.storage import StorageBackend, build_backend
from tx_latency.utils.spool import RecordSpool


class Reporter:
    """Hands finished records to storage."""

    def __init__(
        self,
        config: UploadConfig,
        backend: Optional[StorageBackend] = None,
        spool: Optional[RecordSpool] = None,
    ):
        """
        Args:
            config: Upload settings (backend selection, work dir)
            backend: Pre-built backend; built from config on first use if None
            spool: Local JSONL spool for undelivered records
        """
        self.config = config
        self.backend = backend
        self.spool = spool
        if self.spool is None and config.spool_dir:
            self.spool = RecordSpool(config.spool_dir)

    @property
    def backend_name(self) -> str:
        if self.backend is not None:
            return self.backend.name
        return "s3" if self.config.method == "AWS" else "gcs"

    def report(self, record: MeasurementRecord) -> Outcome:
        """
        Deliver one record.

        Returns:
            Outcome with the remote object name, or the delivery error
        """
        path: Optional[Path] = None
        try:
            if self.backend is None:
                self.backend = build_backend(self.config)
            path = make_parquet_file(record, self.config.work_dir)
            remote = self.backend.upload(path)
        except Exception as e:
            self._fallback(record, e)
            return Outcome.failure(str(e))
        finally:
            if path is not None:
                self._cleanup(path)

        print(f"[Reporter] Uploaded {remote} via {self.backend_name}")
        return Outcome.success(remote)

    def _fallback(self, record: MeasurementRecord, error: Exception):
        print(f"failed to {self.backend_name}.upload!! Printing instead! {error}")
        print(record.to_json())
        if self.spool is not None:
            try:
                self.spool.append(record.to_row())
            except OSError as e:
                print(f"[Reporter] Spool write failed: {e}")

    @staticmethod
    def _cleanup(path: Path):
        try:
            Path(path).unlink(missing_ok=True)
        except OSError as e:
            print(f"[Reporter] Could not remove {path}: {e}")
