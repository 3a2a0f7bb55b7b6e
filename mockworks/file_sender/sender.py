from collections.abc import Iterable, Sequence

from mockworks.config.settings import Settings
from mockworks.file_sender.base import BaseCryptographer, BaseRecognizer, BaseSender
from mockworks.file_sender.clock import BaseClock, SystemClock
from mockworks.file_sender.exceptions import CredentialError
from mockworks.file_sender.factory import (
    CryptographerFactory,
    RecognizerFactory,
    SenderFactory,
)
from mockworks.file_sender.models import Credential, File, SendResult
from mockworks.file_sender.pipeline import FileContext, FileStep
from mockworks.file_sender.steps import (
    CheckFormatStep,
    CheckFreshnessStep,
    RecognizeStep,
    SendStep,
    SignStep,
)
from mockworks.logging.logger import Log

ACCEPTED_FORMATS = ("4.0", "3.1")


class FileSender:
    """Recognizes, validates, signs and sends files one by one.

    Pipeline per file: recognize -> check format -> check freshness -> sign -> send.
    A file that fails any step is skipped; the others are still processed.
    """

    def __init__(
        self,
        cryptographer: BaseCryptographer,
        sender: BaseSender,
        recognizer: BaseRecognizer,
        clock: BaseClock | None = None,
        accepted_formats: Iterable[str] = ACCEPTED_FORMATS,
        freshness_months: int = 1,
    ) -> None:
        self._sender = sender
        self._steps: list[FileStep] = [
            RecognizeStep(recognizer),
            CheckFormatStep(accepted_formats),
            CheckFreshnessStep(clock if clock is not None else SystemClock(), freshness_months),
            SignStep(cryptographer),
            SendStep(sender),
        ]

    def send_files(self, files: Sequence[File], credential: Credential) -> SendResult:
        """Try to send every file and return the ones that were skipped."""
        Log.info(f"Sending {len(files)} files as '{credential.subject}'")
        skipped = [file for file in files if not self._try_send_file(file, credential)]
        Log.info(f"Sent {len(files) - len(skipped)} files, skipped {len(skipped)}")
        return SendResult(skipped_files=skipped)

    def _try_send_file(self, file: File, credential: Credential) -> bool:
        context = FileContext(file=file, credential=credential)
        for step in self._steps:
            context = step.run(context)
            if context.skipped:
                Log.warning(f"Skipped file {file.name}: {context.skip_reason}")
                return False
        Log.info(f"Sent file {file.name}")
        return True

    def close(self) -> None:
        self._sender.close()


def build_file_sender(settings: Settings, clock: BaseClock | None = None) -> FileSender:
    """Build a FileSender with the adapters selected in settings."""
    return FileSender(
        cryptographer=CryptographerFactory.create(settings),
        sender=SenderFactory.create(settings),
        recognizer=RecognizerFactory.create(settings),
        clock=clock,
        accepted_formats=settings.accepted_formats,
        freshness_months=settings.freshness_months,
    )


def build_credential(settings: Settings) -> Credential:
    """Build the signing credential from settings.

    Raises:
        CredentialError: if no signing secret is configured.
    """
    if not settings.signing_secret:
        raise CredentialError("SIGNING_SECRET must be set to sign files")
    return Credential(
        subject=settings.signing_subject,
        secret=settings.signing_secret.encode("utf-8"),
    )

