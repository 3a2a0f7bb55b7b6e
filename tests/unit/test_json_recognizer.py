import json
from collections.abc import Callable
from datetime import datetime, timedelta, timezone

import pytest

from mockworks.file_sender.json_recognizer import JsonRecognizer
from mockworks.file_sender.models import File


class TestRecognizesEnvelope:
    def test_builds_document(
        self, now: datetime, make_envelope: Callable[..., bytes]
    ) -> None:
        file = File(name="a.json", content=make_envelope(fmt="3.1", created=now, body="payload"))

        document = JsonRecognizer().try_recognize(file)

        assert document is not None
        assert document.name == "a.json"
        assert document.format == "3.1"
        assert document.created == now
        assert document.content == b"payload"

    def test_reads_naive_timestamp_as_utc(self) -> None:
        content = json.dumps(
            {"format": "4.0", "created": "2024-03-01T10:00:00", "body": ""}
        ).encode()

        document = JsonRecognizer().try_recognize(File(name="n", content=content))

        assert document is not None
        assert document.created == datetime(2024, 3, 1, 10, tzinfo=timezone.utc)

    def test_keeps_offset(self) -> None:
        content = json.dumps(
            {"format": "4.0", "created": "2024-03-01T10:00:00+02:00", "body": ""}
        ).encode()

        document = JsonRecognizer().try_recognize(File(name="o", content=content))

        assert document is not None
        assert document.created.utcoffset() == timedelta(hours=2)

    def test_does_not_interpret_format(self, make_envelope: Callable[..., bytes]) -> None:
        file = File(name="f", content=make_envelope(fmt="3.10"))

        document = JsonRecognizer().try_recognize(file)

        assert document is not None
        assert document.format == "3.10"


class TestRejectsGarbage:
    @pytest.mark.parametrize(
        "content",
        [
            b"",
            b"\xff\xfe\x00",
            b"not json",
            b"[1, 2]",
            b'{"format": "4.0", "body": "x"}',
            b'{"format": "4.0", "created": "yesterday", "body": "x"}',
            b'{"format": 4.0, "created": "2024-03-01T10:00:00", "body": "x"}',
            b'{"format": "4.0", "created": "2024-03-01T10:00:00", "body": null}',
        ],
    )
    def test_returns_none(self, content: bytes) -> None:
        assert JsonRecognizer().try_recognize(File(name="bad", content=content)) is None
