import calendar
from collections.abc import Iterable
from datetime import datetime, timezone

from mockworks.file_sender.base import BaseCryptographer, BaseRecognizer, BaseSender
from mockworks.file_sender.clock import BaseClock
from mockworks.file_sender.models import Document
from mockworks.file_sender.pipeline import FileContext, FileStep
from mockworks.logging.logger import Log

NOT_RECOGNIZED = "not_recognized"
UNSUPPORTED_FORMAT = "unsupported_format"
OUTDATED = "outdated"
SEND_FAILED = "send_failed"


def add_months(moment: datetime, months: int) -> datetime:
    """Shift by calendar months, clamping the day to the target month's end."""
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def _as_utc(moment: datetime) -> datetime:
    """Read a naive instant as UTC."""
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def _require_document(context: FileContext) -> Document:
    if context.document is None:
        raise ValueError("FileContext.document must be set before validation")
    return context.document


class RecognizeStep(FileStep):
    def __init__(self, recognizer: BaseRecognizer) -> None:
        self._recognizer = recognizer

    def run(self, context: FileContext) -> FileContext:
        context.document = self._recognizer.try_recognize(context.file)
        if context.document is None:
            context.skip_reason = NOT_RECOGNIZED
        return context


class CheckFormatStep(FileStep):
    """Accepts only exact matches from the whitelist; "3.10" is not "3.1"."""

    def __init__(self, accepted_formats: Iterable[str]) -> None:
        self._accepted_formats = frozenset(accepted_formats)

    def run(self, context: FileContext) -> FileContext:
        document = _require_document(context)
        if document.format not in self._accepted_formats:
            Log.debug(f"Format '{document.format}' of {document.name} is not accepted")
            context.skip_reason = UNSUPPORTED_FORMAT
        return context


class CheckFreshnessStep(FileStep):
    def __init__(self, clock: BaseClock, months: int = 1) -> None:
        self._clock = clock
        self._months = months

    def run(self, context: FileContext) -> FileContext:
        document = _require_document(context)
        now = _as_utc(self._clock.now())
        try:
            expires = add_months(_as_utc(document.created), self._months)
        except (ValueError, OverflowError):
            # expiry falls past datetime.max
            return context
        # strictly after: a document created exactly a month ago is outdated
        if not expires > now:
            context.skip_reason = OUTDATED
        return context


class SignStep(FileStep):
    def __init__(self, cryptographer: BaseCryptographer) -> None:
        self._cryptographer = cryptographer

    def run(self, context: FileContext) -> FileContext:
        document = _require_document(context)
        context.signed_content = self._cryptographer.sign(
            document.content, context.credential
        )
        return context


class SendStep(FileStep):
    def __init__(self, sender: BaseSender) -> None:
        self._sender = sender

    def run(self, context: FileContext) -> FileContext:
        if not self._sender.try_send(context.signed_content):
            context.skip_reason = SEND_FAILED
        return context
