"""Per-directory registry record."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class DirectoryEntry:
    """Registry value for one known directory.

    A freshly built entry carries only its base identifier. The mask cache fills up as
    ``DirectoryTree.walk_files`` stores file listings with caching enabled; an empty
    cache simply means no listing has been stored yet.

    Attributes:
        base_id: Identifier of the base path the directory was discovered under.
        cache: Cached short file names per literal mask string, in listing order.

    Example:
        >>> entry = DirectoryEntry(0)
        >>> entry.cached_files("*.py") is None
        True
        >>> entry.store("*.py", ["a.py"])
        >>> entry.cached_files("*.py")
        ['a.py']
    """

    base_id: int
    cache: Dict[str, List[str]] = field(default_factory=dict)

    def cached_files(self, mask: str) -> Optional[List[str]]:
        return self.cache.get(mask)

    def store(self, mask: str, file_names: List[str]) -> None:
        self.cache[mask] = file_names

    @property
    def cached_mask_count(self) -> int:
        return len(self.cache)
