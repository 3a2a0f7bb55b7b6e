from pathlib import Path

from mockworks.config.settings import Settings
from mockworks.file_sender.exceptions import CredentialError
from mockworks.file_sender.file_loader import FileLoader
from mockworks.file_sender.sender import build_credential, build_file_sender
from mockworks.logging.logger import Log


def main() -> int:
    """Entry point: load settings -> read inbox -> send files -> report skipped."""
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        credential = build_credential(settings)
    except CredentialError as exc:
        Log.error(f"Cannot sign files: {exc}")
        return 2

    files = FileLoader(inbox_dir=Path(settings.inbox_dir)).load_all()
    file_sender = build_file_sender(settings)
    try:
        result = file_sender.send_files(files, credential)
    finally:
        file_sender.close()

    for file in result.skipped_files:
        Log.error(f"Not sent: {file.name}")
    return 1 if result.skipped_files else 0


if __name__ == "__main__":
    raise SystemExit(main())
