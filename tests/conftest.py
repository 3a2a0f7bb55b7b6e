import json
from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from mockworks.file_sender.models import Credential, File

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=timezone.utc)


def _make_envelope(
    fmt: str = "4.0",
    created: datetime = NOW,
    body: str = "hello",
) -> bytes:
    """Build file content understood by JsonRecognizer."""
    return json.dumps(
        {"format": fmt, "created": created.isoformat(), "body": body}
    ).encode("utf-8")


@pytest.fixture()
def make_envelope() -> Callable[..., bytes]:
    return _make_envelope


@pytest.fixture()
def now() -> datetime:
    return NOW


@pytest.fixture()
def credential() -> Credential:
    return Credential(subject="tester", secret=b"top-secret")


@pytest.fixture()
def file() -> File:
    return File(name="someFile", content=bytes([1, 2, 3]))
