"""
Storage backends for measurement files.

- AWS: S3 bucket, object key = filename
- GCP: Google Cloud Storage bucket, object = <gcs_prefix>/<filename>
"""

from pathlib import Path
from typing import Protocol

import boto3
from google.cloud import storage

from tx_latency.core.config import UploadConfig


class StorageBackend(Protocol):
    name: str

    def upload(self, path: Path) -> str:
        """Upload a local file; returns the remote object name."""
        ...


class S3Backend:
    """Uploads to an S3 bucket."""

    name = "s3"

    def __init__(self, bucket: str):
        if not bucket:
            raise ValueError("undefined bucket name")
        self.bucket = bucket
        self.client = boto3.client("s3")

    def upload(self, path: Path) -> str:
        key = Path(path).name
        self.client.upload_file(
            str(path),
            self.bucket,
            key,
            ExtraArgs={"ContentType": "application/octet-stream"},
        )
        return key


class GCSBackend:
    """Uploads to a Google Cloud Storage bucket."""

    name = "gcs"

    def __init__(self, project_id: str, key_file_path: str, bucket: str, prefix: str = ""):
        if not (project_id and key_file_path and bucket):
            raise ValueError("undefined parameters")
        self.bucket_name = bucket
        self.prefix = prefix.strip("/")
        self.client = storage.Client.from_service_account_json(key_file_path, project=project_id)

    def upload(self, path: Path) -> str:
        filename = Path(path).name
        destination = f"{self.prefix}/{filename}" if self.prefix else filename
        self.client.bucket(self.bucket_name).blob(destination).upload_from_filename(str(path))
        print(f"[GCS] {filename} uploaded to {self.bucket_name}")
        return destination


def build_backend(config: UploadConfig) -> StorageBackend:
    """
    Select backend from UPLOAD_METHOD.

    Raises:
        ValueError: unknown method or missing backend settings
    """
    if config.method == "AWS":
        return S3Backend(config.s3_bucket)
    if config.method == "GCP":
        return GCSBackend(
            config.gcp_project_id,
            config.gcp_key_file_path,
            config.gcp_bucket,
            config.gcs_prefix,
        )
    raise ValueError(f"Improper upload method: {config.method!r}")
