"""Venue layout records: Coordinates, Section and Connection.

These are the static records a venue layout is made of. Sections are
identified by their normalized name (see :func:`normalize_name`) while the
display form of the name is preserved for presentation.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Tuple

from storenav.exceptions import InvalidWeightError


def normalize_name(name: str) -> str:
    """Return the identity key for a section name.

    Lookups are case-insensitive and ignore surrounding whitespace.

    Examples:
        >>> normalize_name("  Aisle 1 ")
        'aisle 1'
    """
    return name.strip().lower()


@dataclass(frozen=True)
class Coordinates:
    """Axis-aligned rectangle in venue-plan units.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Rectangle width.
        height: Rectangle height.
    """

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Coordinates width/height must be non-negative, got "
                f"width={self.width}, height={self.height}"
            )

    @property
    def center(self) -> Tuple[float, float]:
        """Midpoint of the rectangle."""
        return (self.x + self.width / 2, self.y + self.height / 2)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Coordinates:
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            width=float(data["width"]),
            height=float(data["height"]),
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}


@dataclass(frozen=True)
class Section:
    """A named rectangular zone of a venue.

    Attributes:
        name: Display name. Unique within a venue after normalization.
        color: Fill color used by the presenting application.
        coordinates: Position of the section on the venue plan.
        count: Optional item count shown for the section.
        key: Normalized name used for identity and lookups.
    """

    name: str
    color: str = ""
    coordinates: Coordinates = field(default_factory=lambda: Coordinates(0, 0, 0, 0))
    count: Optional[int] = None
    key: str = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        key = normalize_name(self.name)
        if not key:
            raise ValueError("Section name must be a non-empty string")
        object.__setattr__(self, "key", key)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Section:
        """Build a Section from a layout record.

        Args:
            data: Mapping with ``name``, ``color``, ``coordinates`` and optional
                ``count`` keys.
        """
        count = data.get("count")
        return cls(
            name=str(data["name"]),
            color=str(data.get("color", "")),
            coordinates=Coordinates.from_dict(data["coordinates"]),
            count=int(count) if count is not None else None,
        )

    def to_dict(self) -> dict:
        out: dict = {
            "name": self.name,
            "color": self.color,
            "coordinates": self.coordinates.to_dict(),
        }
        if self.count is not None:
            out["count"] = self.count
        return out


@dataclass(frozen=True)
class Connection:
    """A bidirectional weighted walkway between two sections.

    The layout format calls the endpoints ``from`` and ``to``; they are stored
    as ``source`` and ``target``. Direction carries no meaning.

    Attributes:
        source: Name of one endpoint section (any case/spacing).
        target: Name of the other endpoint section.
        weight: Traversal cost (distance or time). Any real number is accepted
            and stored as a float; it must be strictly positive and finite.

    Raises:
        InvalidWeightError: If the weight is not a real number, or is zero,
            negative, NaN or infinite.
    """

    source: str
    target: str
    weight: float

    def __post_init__(self) -> None:
        weight = self.weight
        if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
            raise InvalidWeightError(self.source, self.target, weight)
        value = float(weight)
        if not math.isfinite(value) or value <= 0:
            raise InvalidWeightError(self.source, self.target, weight)
        object.__setattr__(self, "weight", value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Connection:
        return cls(source=str(data["from"]), target=str(data["to"]), weight=data["weight"])

    def to_dict(self) -> dict:
        return {"from": self.source, "to": self.target, "weight": self.weight}
