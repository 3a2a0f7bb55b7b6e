import threading
from collections.abc import Generator
from contextlib import contextmanager

from mockworks.logging.logger import Log
from mockworks.thing_cache.base import BaseThingService
from mockworks.thing_cache.models import Thing


class ThingCache:
    """Remembers every Thing the service resolved, forever.

    Misses are not remembered: an unresolved id is looked up again on the
    next call. Lookups of the same id are serialized so the service is asked
    at most once per id, while different ids do not wait for each other.
    """

    def __init__(self, thing_service: BaseThingService) -> None:
        self._thing_service = thing_service
        self._things: dict[str, Thing] = {}
        # thing_id -> (lock, number of callers holding or waiting for it)
        self._locks: dict[str, tuple[threading.Lock, int]] = {}
        self._locks_guard = threading.Lock()

    def get(self, thing_id: str) -> Thing | None:
        thing = self._things.get(thing_id)
        if thing is not None:
            return thing

        with self._locked(thing_id):
            thing = self._things.get(thing_id)
            if thing is not None:
                return thing
            thing = self._thing_service.try_read(thing_id)
            if thing is None:
                Log.debug(f"Thing {thing_id} not resolved")
                return None
            self._things[thing_id] = thing
            Log.debug(f"Cached thing {thing_id}")
            return thing

    def close(self) -> None:
        self._thing_service.close()

    @contextmanager
    def _locked(self, thing_id: str) -> Generator[None, None, None]:
        """Hold the per-id lock; it is dropped once nobody needs it."""
        with self._locks_guard:
            lock, users = self._locks.get(thing_id, (threading.Lock(), 0))
            self._locks[thing_id] = (lock, users + 1)
        try:
            with lock:
                yield
        finally:
            with self._locks_guard:
                lock, users = self._locks[thing_id]
                if users == 1:
                    del self._locks[thing_id]
                else:
                    self._locks[thing_id] = (lock, users - 1)

    def __contains__(self, thing_id: object) -> bool:
        return thing_id in self._things

    def __len__(self) -> int:
        return len(self._things)
