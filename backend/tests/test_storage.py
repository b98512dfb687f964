import pytest
from botocore.exceptions import ClientError

from emur.core.config import get_settings
from emur.integrations.storage import SpacesStorage, StorageError


class StubS3Client:
    """Records boto3 S3 calls; fails every call when error_code is set."""

    def __init__(self, error_code=None):
        self.error_code = error_code
        self.calls = []

    def _record(self, operation, **kwargs):
        self.calls.append((operation, kwargs))
        if self.error_code:
            raise ClientError({"Error": {"Code": self.error_code, "Message": "denied"}}, operation)

    def put_object(self, **kwargs):
        self._record("PutObject", **kwargs)

    def delete_object(self, **kwargs):
        self._record("DeleteObject", **kwargs)

    def generate_presigned_url(self, client_method, Params, ExpiresIn):
        self._record("GetObject", Params=Params, ExpiresIn=ExpiresIn)
        return f"https://signed.example/{Params['Key']}?expires={ExpiresIn}"


@pytest.fixture
def spaces_settings():
    return get_settings().model_copy(update={
        "AWS_BUCKET_NAME": "emur",
        "AWS_ENDPOINT": "nyc3.digitaloceanspaces.com",
        "PRESIGNED_URL_EXPIRY": 900,
    })


def test_upload_returns_public_url(spaces_settings):
    client = StubS3Client()
    storage = SpacesStorage(spaces_settings, client=client)

    url = storage.upload(b"img", "uploads/a.png", "image/png")

    assert url == "https://emur.nyc3.digitaloceanspaces.com/uploads/a.png"
    operation, kwargs = client.calls[0]
    assert operation == "PutObject"
    assert kwargs["ACL"] == "public-read"
    assert kwargs["ContentType"] == "image/png"


def test_delete_uses_key_from_public_url(spaces_settings):
    client = StubS3Client()
    SpacesStorage(spaces_settings, client=client).delete("https://emur.nyc3.digitaloceanspaces.com/uploads/a.png")
    assert client.calls == [("DeleteObject", {"Bucket": "emur", "Key": "uploads/a.png"})]


def test_presigned_url_defaults_to_configured_expiry(spaces_settings):
    client = StubS3Client()
    storage = SpacesStorage(spaces_settings, client=client)

    assert storage.presigned_url("uploads/a.png").endswith("expires=900")
    assert storage.presigned_url("uploads/a.png", expires=60).endswith("expires=60")
    assert [kwargs["ExpiresIn"] for _, kwargs in client.calls] == [900, 60]


@pytest.mark.parametrize("call", [
    lambda s: s.upload(b"img", "uploads/a.png", "image/png"),
    lambda s: s.delete("https://emur.nyc3.digitaloceanspaces.com/uploads/a.png"),
    lambda s: s.presigned_url("uploads/a.png"),
])
def test_client_errors_become_storage_errors(spaces_settings, call):
    storage = SpacesStorage(spaces_settings, client=StubS3Client(error_code="AccessDenied"))
    with pytest.raises(StorageError) as exc:
        call(storage)
    assert exc.value.key == "uploads/a.png"
