"""
Software registry — the ordered, immutable list of maintained programs.

Built once at startup (from the built-in catalog or a YAML file) and
handed to the pipeline. Names are unique case-insensitively, and every
lookup is case-insensitive.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from swmaint.core.config.errors import ConfigError
from swmaint.core.models.software import SoftwareEntry


class SoftwareRegistry:
    """Ordered collection of SoftwareEntry, keyed case-insensitively."""

    def __init__(self, entries: Iterable[SoftwareEntry]):
        ordered = tuple(entries)
        index: dict[str, SoftwareEntry] = {}
        for entry in ordered:
            if entry.key in index:
                raise ConfigError(
                    f"Duplicate software name '{entry.name}' "
                    f"(already registered as '{index[entry.key].name}')"
                )
            index[entry.key] = entry
        self._entries = ordered
        self._index = index

    def find(self, name: str) -> SoftwareEntry | None:
        """Look up an entry by name, ignoring case."""
        return self._index.get(name.strip().casefold())

    def names_sorted(self) -> list[str]:
        """All names, case-insensitively ascending."""
        return sorted((e.name for e in self._entries), key=str.casefold)

    @property
    def entries(self) -> tuple[SoftwareEntry, ...]:
        return self._entries

    def __iter__(self) -> Iterator[SoftwareEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.find(name) is not None

    def __repr__(self) -> str:
        return f"<SoftwareRegistry entries={len(self._entries)}>"
