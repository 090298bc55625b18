"""Type definitions for fluentext."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Stringable(Protocol):
    """Anything that can render itself as a canonical string."""

    def to_string(self) -> str:
        """Return the canonical string form."""

