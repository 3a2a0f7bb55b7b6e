from abc import ABC, abstractmethod

from mockworks.file_sender.models import Credential, Document, File


class BaseRecognizer(ABC):
    """Contract for all file recognition adapters."""

    @abstractmethod
    def try_recognize(self, file: File) -> Document | None:
        """Turn a raw file into a Document.

        Args:
            file: File as submitted by the caller.

        Returns:
            The recognized Document, or None if the file is not recognized.
        """


class BaseCryptographer(ABC):
    """Contract for all signing adapters."""

    @abstractmethod
    def sign(self, content: bytes, credential: Credential) -> bytes:
        """Sign document content with the given credential.

        Returns:
            Signed content, ready to be handed to a sender.

        Raises:
            CredentialError: if the credential cannot be used for signing.
        """


class BaseSender(ABC):
    """Contract for all transport adapters."""

    @abstractmethod
    def try_send(self, signed_content: bytes) -> bool:
        """Transmit signed content once. Returns True if it was accepted."""

    def close(self) -> None:
        """Release held resources. Adapters without any keep this no-op."""
