class FileSenderError(Exception):
    """Base exception for all file sender errors."""


class CredentialError(FileSenderError):
    """Raised when a credential cannot be used for signing."""


class InboxNotFoundError(FileSenderError):
    """Raised when the inbox directory does not exist."""
