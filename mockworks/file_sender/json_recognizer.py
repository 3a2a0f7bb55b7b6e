import json
from datetime import datetime, timezone

from mockworks.file_sender.base import BaseRecognizer
from mockworks.file_sender.models import Document, File
from mockworks.logging.logger import Log


class JsonRecognizer(BaseRecognizer):
    """Recognizes files holding a JSON envelope.

    Expected shape: {"format": "4.0", "created": "<ISO-8601>", "body": "..."}.
    Timestamps without an offset are read as UTC.
    """

    def try_recognize(self, file: File) -> Document | None:
        try:
            envelope = json.loads(file.content.decode("utf-8"))
            fmt = envelope["format"]
            created = datetime.fromisoformat(envelope["created"])
            body = envelope["body"]
        except (UnicodeDecodeError, ValueError, KeyError, TypeError) as exc:
            Log.debug(f"File {file.name} is not a recognizable envelope: {exc}")
            return None
        if not isinstance(fmt, str) or not isinstance(body, str):
            return None
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        return Document(
            name=file.name,
            content=body.encode("utf-8"),
            created=created,
            format=fmt,
        )
