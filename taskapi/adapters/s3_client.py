"""Shared S3/R2 client helper built from the R2_* settings."""

from __future__ import annotations

from taskapi.app.config import get_settings


def get_bucket_name() -> str:
    bucket = get_settings().r2_bucket_name
    if not bucket:
        raise RuntimeError("R2_BUCKET_NAME is not configured")
    return bucket


def get_s3_client():
    settings = get_settings()
    if not (settings.r2_endpoint and settings.r2_access_key and settings.r2_secret_key):
        raise RuntimeError("R2 S3 client is not configured")
    import boto3  # noqa: PLC0415

    return boto3.client(
        "s3",
        endpoint_url=settings.r2_endpoint,
        aws_access_key_id=settings.r2_access_key,
        aws_secret_access_key=settings.r2_secret_key,
        region_name="auto",
    )
