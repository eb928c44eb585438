"""Section registry: the fixed set of named sections for one venue.

The registry resolves free-text names to sections using the normalized
(case and whitespace insensitive) comparison. Registration order is kept and
is significant: the shortest-path solver breaks distance ties in favour of
the first-registered section.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional

from storenav.exceptions import DuplicateNameError, SectionNotFoundError
from storenav.logging import get_logger
from storenav.model.venue import Section, normalize_name

LOGGER = get_logger(__name__)


class SectionRegistry:
    """Read-only collection of sections keyed by normalized name.

    Build instances with :meth:`load`; the registry is not modified after
    construction.
    """

    __slots__ = ("_by_key",)

    def __init__(self, by_key: Mapping[str, Section]) -> None:
        self._by_key: Mapping[str, Section] = MappingProxyType(dict(by_key))

    @classmethod
    def load(cls, sections: Iterable[Section]) -> SectionRegistry:
        """Create a registry from a list of sections.

        Args:
            sections: Sections in registration order.

        Returns:
            A new registry.

        Raises:
            DuplicateNameError: If two sections share a normalized name.
        """
        by_key: Dict[str, Section] = {}
        for section in sections:
            existing = by_key.get(section.key)
            if existing is not None:
                raise DuplicateNameError(section.name, existing.name)
            by_key[section.key] = section
        LOGGER.debug("Loaded section registry with %d section(s)", len(by_key))
        return cls(by_key)

    def find(self, name: str) -> Section:
        """Return the section matching ``name``.

        Raises:
            SectionNotFoundError: If no section matches.
        """
        section = self._by_key.get(normalize_name(name))
        if section is None:
            raise SectionNotFoundError(name)
        return section

    def get(self, name: str, default: Optional[Section] = None) -> Optional[Section]:
        """Return the section matching ``name`` or ``default``."""
        return self._by_key.get(normalize_name(name), default)

    def keys(self) -> List[str]:
        """Normalized names in registration order."""
        return list(self._by_key)

    def names(self) -> List[str]:
        """Display names in registration order."""
        return [s.name for s in self._by_key.values()]

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        return normalize_name(name) in self._by_key

    def __iter__(self) -> Iterator[Section]:
        return iter(self._by_key.values())

    def __len__(self) -> int:
        return len(self._by_key)

    def __repr__(self) -> str:
        return f"SectionRegistry({self.names()!r})"
