from mockworks.thing_cache.base import BaseThingService
from mockworks.thing_cache.cache import ThingCache
from mockworks.thing_cache.factory import ThingServiceFactory, build_thing_cache
from mockworks.thing_cache.models import Thing

__all__ = ["BaseThingService", "Thing", "ThingCache", "ThingServiceFactory", "build_thing_cache"]
