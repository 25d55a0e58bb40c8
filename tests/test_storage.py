import json
from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from fundconnect.vendors.aws.s3_bucket import MAX_UPLOAD_TAG, S3BucketService


def client_error(code, operation="HeadBucket"):
    return ClientError({"Error": {"Code": code, "Message": code}}, operation)


@pytest.fixture()
def s3(monkeypatch):
    client = MagicMock()
    monkeypatch.setattr("boto3.client", lambda *args, **kwargs: client)
    return client


@pytest.fixture()
def signed_in(login_as):
    login_as("user-1", "agent")


def test_check_requires_session(client, s3):
    response = client.get("/api/storage/check")

    assert response.status_code == 401
    assert response.get_json()["success"] is False
    s3.head_bucket.assert_not_called()


def test_check_passes(client, signed_in, s3):
    response = client.get("/api/storage/check")

    body = response.get_json()
    assert response.status_code == 200
    assert body["success"] is True
    assert body["message"] == "Storage policies are correctly configured"
    assert body["path"].startswith("test_") and body["path"].endswith(".png")
    s3.put_object.assert_called_once()
    s3.delete_object.assert_called_once_with(Bucket="fund-documents", Key=body["path"])


def test_check_missing_bucket(client, signed_in, s3):
    s3.head_bucket.side_effect = client_error("404")

    response = client.get("/api/storage/check")

    assert response.status_code == 404
    assert response.get_json()["error"] == "Bucket does not exist"


def test_check_falls_back_to_public_path_then_fails(client, signed_in, s3):
    s3.put_object.side_effect = [client_error("AccessDenied", "PutObject"), None]

    ok = client.get("/api/storage/check").get_json()
    assert ok["success"] is True
    assert ok["path"].startswith("public/test_")

    s3.put_object.side_effect = client_error("AccessDenied", "PutObject")
    denied = client.get("/api/storage/check")
    assert denied.status_code == 403
    assert "AccessDenied" in denied.get_json()["details"]


def test_check_unexpected_error(client, signed_in, s3):
    s3.head_bucket.side_effect = client_error("InternalError")

    response = client.get("/api/storage/check")

    assert response.status_code == 500
    assert response.get_json()["error"] == "Unexpected error"


def test_ensure_bucket_creates_public_bucket_with_size_tag(app, s3):
    s3.head_bucket.side_effect = client_error("404")

    result = S3BucketService("docs").ensure_bucket(public=True, max_upload_bytes=1024)

    assert result == {"bucket": "docs", "created": True, "public": True, "max_upload_bytes": 1024}
    s3.create_bucket.assert_called_once()
    policy = json.loads(s3.put_bucket_policy.call_args.kwargs["Policy"])
    assert policy["Statement"][0]["Resource"] == "arn:aws:s3:::docs/*"
    tags = s3.put_bucket_tagging.call_args.kwargs["Tagging"]["TagSet"]
    assert tags == [{"Key": MAX_UPLOAD_TAG, "Value": "1024"}]


def test_ensure_existing_private_bucket(app, s3):
    s3.delete_bucket_policy.side_effect = client_error("NoSuchBucketPolicy", "DeleteBucketPolicy")

    result = S3BucketService("docs").ensure_bucket(public=False)

    assert result["created"] is False
    s3.create_bucket.assert_not_called()
    s3.put_bucket_policy.assert_not_called()


def test_setup_storage_command(app, s3):
    result = app.test_cli_runner().invoke(args=["setup-storage", "--private"])

    assert result.exit_code == 0
    assert "already existed" in result.output
