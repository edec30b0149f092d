from urllib.parse import parse_qs, urlsplit

from app.core.config import Settings
from app.services.storage import StorageService


def _storage(**values) -> StorageService:
    base = {
        "S3_ENDPOINT": "http://localhost:9000",
        "S3_ACCESS_KEY": "key",
        "S3_SECRET_KEY": "secret",
        "S3_BUCKET": "typebot",
        "S3_REGION": "us-east-1",
    }
    base.update(values)
    return StorageService(Settings(**base))


def test_presigned_put_targets_bucket_key():
    url = _storage().create_presigned_put("public/users/u1/avatar.png")
    assert url.split("?", 1)[0] == "http://localhost:9000/typebot/public/users/u1/avatar.png"

    query = parse_qs(urlsplit(url).query)
    assert query["X-Amz-Expires"] == ["600"]
    assert "X-Amz-Signature" in query
    assert query["X-Amz-SignedHeaders"] == ["host"]


def test_presigned_put_signs_content_type():
    url = _storage().create_presigned_put("public/a.png", "image/png", expires_in=60)
    query = parse_qs(urlsplit(url).query)
    assert query["X-Amz-Expires"] == ["60"]
    assert "content-type" in query["X-Amz-SignedHeaders"][0]


def test_presigned_ttl_comes_from_settings():
    url = _storage(S3_PRESIGNED_TTL=120).create_presigned_put("public/a.png")
    assert parse_qs(urlsplit(url).query)["X-Amz-Expires"] == ["120"]


def test_bare_host_endpoint_defaults_to_https():
    url = _storage(S3_ENDPOINT="s3.amazonaws.com").create_presigned_put("public/a.png")
    assert url.split("?", 1)[0] == "https://s3.amazonaws.com/typebot/public/a.png"
