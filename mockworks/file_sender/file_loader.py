from pathlib import Path

from mockworks.file_sender.exceptions import InboxNotFoundError
from mockworks.file_sender.models import File


class FileLoader:
    """Reads every regular file of an inbox directory as a File."""

    INBOX_DIR = Path("/app/inbox")

    def __init__(self, inbox_dir: Path | None = None) -> None:
        self._inbox_dir = inbox_dir if inbox_dir is not None else self.INBOX_DIR

    def load_all(self) -> list[File]:
        """Read inbox files sorted by name.

        Raises:
            InboxNotFoundError: if the inbox directory does not exist.
        """
        if not self._inbox_dir.is_dir():
            raise InboxNotFoundError(f"Inbox not found: {self._inbox_dir}")
        paths = sorted(p for p in self._inbox_dir.iterdir() if p.is_file())
        return [File(name=p.name, content=p.read_bytes()) for p in paths]
