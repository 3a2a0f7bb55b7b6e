import hashlib
from pathlib import Path

from mockworks.file_sender.base import BaseSender
from mockworks.logging.logger import Log


def outbox_file_path(outbox_dir: Path, signed_content: bytes) -> Path:
    """Build path to outbox entry: {outbox_dir}/{sha256}.signed"""
    return outbox_dir / f"{hashlib.sha256(signed_content).hexdigest()}.signed"


class OutboxSender(BaseSender):
    """Drops signed content into a local outbox directory."""

    OUTBOX_DIR = Path("/app/outbox")

    def __init__(self, outbox_dir: Path | None = None) -> None:
        self._outbox_dir = outbox_dir if outbox_dir is not None else self.OUTBOX_DIR

    def try_send(self, signed_content: bytes) -> bool:
        path = outbox_file_path(self._outbox_dir, signed_content)
        try:
            self._outbox_dir.mkdir(parents=True, exist_ok=True)
            path.write_bytes(signed_content)
        except OSError as exc:
            Log.warning(f"Writing {path} failed: {exc}")
            return False
        return True
