from typing import Any

import boto3
from botocore.client import Config

from app.core.config import Settings, get_settings


def _endpoint_url(endpoint: str | None) -> str | None:
    # Bare hosts such as "s3.amazonaws.com" default to https.
    if not endpoint:
        return None
    if "://" not in endpoint:
        endpoint = f"https://{endpoint}"
    return endpoint.rstrip("/")


class StorageService:
    """S3-compatible backend that signs direct uploads."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        endpoint = _endpoint_url(self.settings.s3_endpoint)
        session = boto3.session.Session()
        self.client = session.client(
            "s3",
            endpoint_url=endpoint,
            aws_access_key_id=self.settings.s3_access_key,
            aws_secret_access_key=self.settings.s3_secret_key,
            region_name=self.settings.s3_region or "us-east-1",
            config=Config(signature_version="s3v4", s3={"addressing_style": "path"}),
        )
        self.bucket = self.settings.s3_bucket

    def create_presigned_put(
        self,
        key: str,
        content_type: str | None = None,
        expires_in: int | None = None,
    ) -> str:
        params: dict[str, Any] = {"Bucket": self.bucket, "Key": key}
        if content_type:
            params["ContentType"] = content_type
        return self.client.generate_presigned_url(
            "put_object",
            Params=params,
            ExpiresIn=expires_in or self.settings.s3_presigned_ttl,
        )


_storage_service: StorageService | None = None


def get_storage_service() -> StorageService:
    global _storage_service
    if _storage_service is None:
        _storage_service = StorageService()
    return _storage_service


def reset_storage_service() -> None:
    global _storage_service
    _storage_service = None
