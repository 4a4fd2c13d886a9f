"""
Dataclasses for the resource list.

A resource is immutable; changing one means replacing it with a new value at
the same position in the list.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Resource:
    """A link in the resource list with an optional description."""

    url: str
    description: str | None = None

    def to_dict(self) -> dict:
        """Serialize into the shape stored in the resources file."""
        return {"url": self.url, "description": self.description}

    def display_line(self) -> str:
        if self.description is None:
            return self.url
        return f"{self.url} - {self.description}"


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing decoded JSON into resources."""

    resources: tuple[Resource, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
