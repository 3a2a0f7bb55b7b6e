from pathlib import Path

from mockworks.config.settings import Settings
from mockworks.file_sender.base import BaseCryptographer, BaseRecognizer, BaseSender
from mockworks.file_sender.hmac_cryptographer import HmacCryptographer
from mockworks.file_sender.http_sender import HttpSender
from mockworks.file_sender.json_recognizer import JsonRecognizer
from mockworks.file_sender.outbox_sender import OutboxSender


class RecognizerFactory:
    """Creates the configured recognizer adapter."""

    ADAPTERS: dict[str, type[BaseRecognizer]] = {
        "json": JsonRecognizer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseRecognizer:
        name = settings.recognizer.lower()
        adapter_cls = cls.ADAPTERS.get(name)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown recognizer '{name}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()


class CryptographerFactory:
    """Creates the configured signing adapter."""

    @classmethod
    def create(cls, settings: Settings) -> BaseCryptographer:
        name = settings.cryptographer.lower()
        if name != "hmac":
            raise ValueError(f"Unknown cryptographer '{name}'. Choose from: ['hmac']")
        return HmacCryptographer(algorithm=settings.signing_algorithm.lower())


class SenderFactory:
    """Creates the configured transport adapter."""

    SUPPORTED = ("http", "outbox")

    @classmethod
    def create(cls, settings: Settings) -> BaseSender:
        name = settings.sender.lower()
        if name == "outbox":
            return OutboxSender(outbox_dir=Path(settings.outbox_dir))
        if name == "http":
            url = settings.sender_url.strip()
            if not url:
                raise ValueError("sender_url is required for sender=http")
            return HttpSender(url=url, timeout_seconds=settings.sender_timeout_seconds)
        raise ValueError(f"Unknown sender '{name}'. Choose from: {list(cls.SUPPORTED)}")
