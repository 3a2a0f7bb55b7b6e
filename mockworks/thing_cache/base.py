from abc import ABC, abstractmethod

from mockworks.thing_cache.models import Thing


class BaseThingService(ABC):
    """Contract for all thing lookup adapters."""

    @abstractmethod
    def try_read(self, thing_id: str) -> Thing | None:
        """Resolve an id to a Thing.

        Returns:
            The Thing, or None if it could not be resolved for any reason.
        """

    def close(self) -> None:
        """Release held resources. Adapters without any keep this no-op."""
