import pytest

from s3put import uploader


class DummyBucket:
    def __init__(self, fail_on=None, error=None):
        self.calls = []
        self.bodies = []
        self.fail_on = fail_on
        self.error = error

    def put_object(self, Key, Body, ContentLength, ContentType, ACL):
        self.bodies.append(Body)
        if self.fail_on is not None and Key == self.fail_on:
            raise self.error
        self.calls.append({
            "Key": Key,
            "ContentLength": ContentLength,
            "ContentType": ContentType,
            "ACL": ACL,
            "data": Body.read(),
        })


@pytest.fixture
def env(monkeypatch):
    for name in ("S3_ACL", "S3_REGION", "S3_BUCKET", "S3_ACCESS_KEY", "S3_SECRET_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("S3_BUCKET", "b")
    monkeypatch.setenv("S3_ACCESS_KEY", "k")
    monkeypatch.setenv("S3_SECRET_KEY", "s")
    return monkeypatch


@pytest.fixture
def bucket(monkeypatch):
    b = DummyBucket()
    opened = []

    def fake_open_bucket(config):
        opened.append(config)
        return b

    monkeypatch.setattr(uploader, "open_bucket", fake_open_bucket)
    b.opened = opened
    return b
