"""Error types raised by the route graph engine.

All errors derive from :class:`StoreNavError`. Where a builtin category fits,
errors also derive from it (``ValueError`` for bad layout data,
``LookupError`` for names that do not resolve) so callers can catch either.
"""

from __future__ import annotations

from typing import Iterable, Tuple


class StoreNavError(Exception):
    """Base class for storenav errors."""


class DuplicateNameError(StoreNavError, ValueError):
    """Two sections normalize to the same identifier."""

    def __init__(self, name: str, existing: str) -> None:
        self.name = name
        self.existing = existing
        super().__init__(
            f"Section '{name}' collides with already registered section '{existing}'."
        )


class InvalidWeightError(StoreNavError, ValueError):
    """A connection weight is not a strictly positive finite number."""

    def __init__(self, source: str, target: str, weight: object) -> None:
        self.source = source
        self.target = target
        self.weight = weight
        super().__init__(
            f"Connection '{source}' -> '{target}' has invalid weight {weight!r}; "
            "weights must be positive finite numbers."
        )


class SectionNotFoundError(StoreNavError, LookupError):
    """A section name does not resolve against the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Section '{name}' not found.")


class UnresolvedConnectionError(StoreNavError, ValueError):
    """A connection names an unknown section (strict build mode only)."""

    def __init__(self, source: str, target: str, missing: Iterable[str]) -> None:
        self.source = source
        self.target = target
        self.missing: Tuple[str, ...] = tuple(missing)
        super().__init__(
            f"Connection '{source}' -> '{target}' references unknown "
            f"section(s): {', '.join(repr(m) for m in self.missing)}."
        )


class InvalidLocationError(StoreNavError, LookupError):
    """A shortest-path query names an unknown start or end section."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names: Tuple[str, ...] = tuple(names)
        super().__init__(
            "Invalid location(s): "
            + ", ".join(repr(n) for n in self.names)
            + ". Please enter valid start and end locations."
        )


class NoPathError(StoreNavError):
    """Both sections exist but no walkway connects them."""

    def __init__(self, start: str, end: str) -> None:
        self.start = start
        self.end = end
        super().__init__(f"No path between '{start}' and '{end}'.")


class UnresolvedItemsError(StoreNavError, LookupError):
    """One or more multi-stop items do not match any section."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names: Tuple[str, ...] = tuple(names)
        super().__init__(
            "Some items do not correspond to any section: "
            + ", ".join(repr(n) for n in self.names)
        )
