from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class File:
    """A named blob submitted for sending."""

    name: str
    content: bytes


@dataclass(frozen=True)
class Document:
    """Structured view of a File produced by a recognizer."""

    name: str
    content: bytes
    created: datetime
    format: str


@dataclass(frozen=True)
class Credential:
    """Signing identity passed through to the cryptographer untouched."""

    subject: str
    secret: bytes = field(repr=False)


@dataclass
class SendResult:
    """Files that could not be sent, in the order they were submitted."""

    skipped_files: list[File] = field(default_factory=list)
