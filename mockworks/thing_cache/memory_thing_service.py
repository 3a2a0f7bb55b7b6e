"""Dict-backed thing service for local runs and tests."""

from collections.abc import Iterable

from mockworks.thing_cache.base import BaseThingService
from mockworks.thing_cache.models import Thing


class InMemoryThingService(BaseThingService):
    def __init__(self, things: Iterable[Thing] = ()) -> None:
        self._things = {thing.thing_id: thing for thing in things}

    def add(self, thing: Thing) -> None:
        self._things[thing.thing_id] = thing

    def try_read(self, thing_id: str) -> Thing | None:
        return self._things.get(thing_id)
