from mockworks.config.settings import Settings
from mockworks.thing_cache.base import BaseThingService
from mockworks.thing_cache.cache import ThingCache
from mockworks.thing_cache.http_thing_service import HttpThingService
from mockworks.thing_cache.memory_thing_service import InMemoryThingService


class ThingServiceFactory:
    """Creates the configured thing service adapter."""

    SUPPORTED = ("http", "memory")

    @classmethod
    def create(cls, settings: Settings) -> BaseThingService:
        name = settings.thing_service.lower()
        if name == "memory":
            return InMemoryThingService()
        if name == "http":
            url = settings.thing_service_url.strip()
            if not url:
                raise ValueError("thing_service_url is required for thing_service=http")
            return HttpThingService(
                base_url=url,
                timeout_seconds=settings.thing_service_timeout_seconds,
            )
        raise ValueError(
            f"Unknown thing service '{name}'. Choose from: {list(cls.SUPPORTED)}"
        )


def build_thing_cache(settings: Settings) -> ThingCache:
    """Build a ThingCache over the configured service."""
    return ThingCache(ThingServiceFactory.create(settings))
