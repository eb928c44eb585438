"""Lightweight representation of a route through a venue.

The ``Route`` dataclass stores an ordered sequence of sections and, for routes
produced by the shortest-path solver, the total walkway weight. Helpers expose
display names, consecutive segments and the section centers a presenter draws
lines between.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

from storenav.model.venue import Section


@dataclass(frozen=True)
class Route:
    """An ordered sequence of sections.

    Attributes:
        sections: Sections in visiting order. Repeats are allowed.
        cost: Total weight for solver routes; ``None`` for itineraries whose
            stops are not joined by computed walkways.
    """

    sections: Tuple[Section, ...] = ()
    cost: Optional[float] = None

    def __post_init__(self) -> None:
        if not isinstance(self.sections, tuple):
            object.__setattr__(self, "sections", tuple(self.sections))

    def __getitem__(self, idx: int) -> Section:
        return self.sections[idx]

    def __iter__(self) -> Iterator[Section]:
        return iter(self.sections)

    def __len__(self) -> int:
        return len(self.sections)

    def __bool__(self) -> bool:
        return bool(self.sections)

    @property
    def start(self) -> Section:
        """Return the first section of the route."""
        return self.sections[0]

    @property
    def end(self) -> Section:
        """Return the last section of the route."""
        return self.sections[-1]

    @property
    def names(self) -> List[str]:
        """Display names in visiting order."""
        return [s.name for s in self.sections]

    @property
    def is_traversable(self) -> bool:
        """True when the route has at least one segment to walk."""
        return len(self.sections) > 1

    def segments(self) -> Iterator[Tuple[Section, Section]]:
        """Yield consecutive ``(from, to)`` section pairs.

        Routes of length 0 or 1 yield nothing.
        """
        for i in range(len(self.sections) - 1):
            yield self.sections[i], self.sections[i + 1]

    def waypoints(self) -> List[Tuple[float, float]]:
        """Centers of the route's sections in visiting order."""
        return [s.coordinates.center for s in self.sections]

    def __lt__(self, other: Any) -> bool:
        """Order solver routes by cost."""
        if not isinstance(other, Route):
            return NotImplemented
        if self.cost is None or other.cost is None:
            return NotImplemented
        return self.cost < other.cost

    def to_dict(self) -> dict:
        return {"sections": self.names, "cost": self.cost}
