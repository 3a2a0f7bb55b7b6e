from abc import ABC, abstractmethod
from dataclasses import dataclass

from mockworks.file_sender.models import Credential, Document, File


@dataclass(slots=True)
class FileContext:
    file: File
    credential: Credential
    document: Document | None = None
    signed_content: bytes = b""
    skip_reason: str = ""

    @property
    def skipped(self) -> bool:
        return bool(self.skip_reason)


class FileStep(ABC):
    """One stage of sending a single file.

    A step either fills in the context for the next step or sets
    ``skip_reason``, which stops the pipeline for that file.
    """

    @abstractmethod
    def run(self, context: FileContext) -> FileContext:
        raise NotImplementedError
