"""
Parquet encoding for measurement records.

One record becomes a one-row parquet file named
``YYYYMMDD_HHMMSS_<chainId>.parquet``.
"""

from pathlib import Path

import pandas as pd

from tx_latency.reporting.record import MeasurementRecord
from tx_latency.utils.timing import file_timestamp


TIMESTAMP_COLUMNS = ["executedAt", "startTime", "endTime"]
INT_COLUMNS = ["chainId", "latency", "resourceUsedOfLatestBlock", "numOfTxInLatestBlock", "pingTime"]
FLOAT_COLUMNS = ["txFee", "txFeeInUSD"]
STRING_COLUMNS = ["txhash", "error"]


def parquet_filename(record: MeasurementRecord) -> str:
    return f"{file_timestamp()}_{record.chain_id}.parquet"


def to_frame(record: MeasurementRecord) -> pd.DataFrame:
    """Single-row DataFrame with warehouse column names and types."""
    df = pd.DataFrame([record.to_row()])
    for col in TIMESTAMP_COLUMNS:
        df[col] = pd.to_datetime(df[col], unit="ms")
    df[INT_COLUMNS] = df[INT_COLUMNS].astype("int64")
    df[FLOAT_COLUMNS] = df[FLOAT_COLUMNS].astype("float64")
    df[STRING_COLUMNS] = df[STRING_COLUMNS].astype(str)
    return df


def make_parquet_file(record: MeasurementRecord, directory: str = ".") -> Path:
    """
    Write record to a parquet file.

    Args:
        record: Measurement to encode
        directory: Output directory (created if missing)

    Returns:
        Path of the written file
    """
    out_dir = Path(directory)
    out_dir.mkdir(parents=True, exist_ok=True)
    path = out_dir / parquet_filename(record)
    to_frame(record).to_parquet(
        path,
        engine="pyarrow",
        index=False,
        coerce_timestamps="ms",
        allow_truncated_timestamps=True,
    )
    return path
