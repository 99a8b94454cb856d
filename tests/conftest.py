from io import BytesIO

import pytest
from botocore.exceptions import ClientError
from PIL import Image

import app


class FakeS3:
    """In-memory stand-in for the boto3 S3 client, recording every call."""

    def __init__(self):
        self.objects = {}
        self.get_calls = []
        self.put_calls = []
        self.bodies = []
        self.fail_get = None
        self.fail_put = None

    def add(self, bucket, key, data, content_type=None):
        self.objects[(bucket, key)] = (data, content_type)

    def get_object(self, Bucket, Key):
        self.get_calls.append((Bucket, Key))
        if self.fail_get is not None:
            raise self.fail_get
        if (Bucket, Key) not in self.objects:
            raise ClientError(
                {"Error": {"Code": "NoSuchKey", "Message": "The specified key does not exist."}},
                "GetObject",
            )
        data, content_type = self.objects[(Bucket, Key)]
        body = BytesIO(data)
        self.bodies.append(body)
        response = {"Body": body, "ContentLength": len(data)}
        if content_type is not None:
            response["ContentType"] = content_type
        return response

    def put_object(self, Bucket, Key, Body, ContentType):
        self.put_calls.append({"Bucket": Bucket, "Key": Key, "Body": Body, "ContentType": ContentType})
        if self.fail_put is not None:
            raise self.fail_put
        self.objects[(Bucket, Key)] = (Body, ContentType)

    @property
    def calls(self):
        return len(self.get_calls) + len(self.put_calls)


def image_bytes(size, image_format="JPEG", mode="RGB"):
    buffer = BytesIO()
    Image.new(mode, size, color="white" if mode == "RGB" else 0).save(buffer, format=image_format)
    return buffer.getvalue()


def s3_event(key, bucket="photo-bucket"):
    return {
        "Records": [
            {
                "eventSource": "aws:s3",
                "s3": {
                    "bucket": {"name": bucket},
                    "object": {"key": key},
                },
            }
        ]
    }


@pytest.fixture
def fake_s3(monkeypatch):
    fake = FakeS3()
    monkeypatch.setattr(app, "s3", fake)
    return fake


@pytest.fixture
def make_image():
    return image_bytes


@pytest.fixture
def make_event():
    return s3_event
