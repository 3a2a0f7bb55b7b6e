from urllib.parse import quote

import httpx

from mockworks.logging.logger import Log
from mockworks.thing_cache.base import BaseThingService
from mockworks.thing_cache.models import Thing


class HttpThingService(BaseThingService):
    """Looks things up at GET {base_url}/things/{thing_id}.

    The id is percent-encoded as a single path segment.
    """

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: int,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    def try_read(self, thing_id: str) -> Thing | None:
        try:
            response = self._client.get(f"/things/{quote(thing_id, safe='')}")
        except httpx.HTTPError as exc:
            Log.warning(f"Thing service lookup of {thing_id} failed: {exc}")
            return None
        if response.status_code != httpx.codes.OK:
            Log.debug(f"Thing service returned {response.status_code} for {thing_id}")
            return None
        try:
            payload = response.json()
        except ValueError as exc:
            Log.warning(f"Thing service sent invalid JSON for {thing_id}: {exc}")
            return None
        if not isinstance(payload, dict):
            return None
        return Thing(thing_id=thing_id, attributes=payload)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpThingService":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
