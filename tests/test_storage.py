"""Tests for storage backend selection and uploads (cloud SDKs mocked)."""

from pathlib import Path
from unittest.mock import patch

import pytest

from tx_latency.core.config import UploadConfig
from tx_latency.reporting.storage import GCSBackend, S3Backend, build_backend


def test_s3_upload_uses_filename_as_key():
    with patch("tx_latency.reporting.storage.boto3.client") as client_factory:
        backend = build_backend(UploadConfig(method="AWS", s3_bucket="latency-bucket"))
        key = backend.upload(Path("/tmp/20240101_000000_296.parquet"))

    assert isinstance(backend, S3Backend)
    assert key == "20240101_000000_296.parquet"
    client_factory.assert_called_once_with("s3")
    args, kwargs = client_factory.return_value.upload_file.call_args
    assert args == ("/tmp/20240101_000000_296.parquet", "latency-bucket", key)
    assert kwargs["ExtraArgs"]["ContentType"] == "application/octet-stream"


def test_gcs_upload_prefixes_destination():
    with patch("tx_latency.reporting.storage.storage.Client") as gcs_client:
        backend = build_backend(UploadConfig(
            method="GCP",
            gcp_project_id="proj",
            gcp_key_file_path="/secrets/key.json",
            gcp_bucket="bucket",
        ))
        dest = backend.upload(Path("/tmp/20240101_000000_296.parquet"))

    assert isinstance(backend, GCSBackend)
    assert dest == "tx-latency-measurement/hedera/20240101_000000_296.parquet"
    gcs_client.from_service_account_json.assert_called_once_with("/secrets/key.json", project="proj")
    client = gcs_client.from_service_account_json.return_value
    client.bucket.assert_called_once_with("bucket")
    client.bucket.return_value.blob.assert_called_once_with(dest)


def test_missing_s3_bucket():
    with pytest.raises(ValueError, match="undefined bucket name"):
        build_backend(UploadConfig(method="AWS"))


def test_missing_gcs_parameters():
    with pytest.raises(ValueError, match="undefined parameters"):
        build_backend(UploadConfig(method="GCP", gcp_bucket="bucket"))


def test_improper_upload_method():
    with pytest.raises(ValueError, match="Improper upload method"):
        build_backend(UploadConfig(method="FTP"))
