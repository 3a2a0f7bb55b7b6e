from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Thing:
    """A value resolved by a thing service."""

    thing_id: str
    attributes: dict[str, Any] = field(default_factory=dict, hash=False)
