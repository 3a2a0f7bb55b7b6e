import httpx

from mockworks.file_sender.base import BaseSender
from mockworks.logging.logger import Log


class HttpSender(BaseSender):
    """Posts signed content to a receiving endpoint.

    Any 2xx response counts as delivered. Transport errors and other
    statuses are reported as a failed send, never raised.
    """

    def __init__(
        self,
        *,
        url: str,
        timeout_seconds: int,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url = url
        self._client = httpx.Client(timeout=timeout_seconds, transport=transport)

    def try_send(self, signed_content: bytes) -> bool:
        try:
            response = self._client.post(
                self._url,
                content=signed_content,
                headers={"Content-Type": "application/json"},
            )
        except httpx.HTTPError as exc:
            Log.warning(f"Sending to {self._url} failed: {exc}")
            return False
        if not response.is_success:
            Log.warning(f"Sending to {self._url} rejected with status {response.status_code}")
            return False
        return True

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpSender":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
