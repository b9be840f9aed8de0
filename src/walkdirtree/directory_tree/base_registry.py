"""Registry of base paths and the configuration each one was built with."""

from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple

from walkdirtree.exceptions import DuplicateBasePath, DuplicateIdentifier
from walkdirtree.exclusion_rules.base_rules import BaseExclusionRules


@dataclass(frozen=True)
class BaseConfig:
    """Everything needed to rebuild the tree of one base path.

    Attributes:
        base_path: Canonical base path, forward slashes, trailing separator.
        exclude_paths: Exclusion specifiers exactly as supplied, resolved again on rebuild.
        include_hidden: Whether dot-prefixed directories are descended.
        mask: Mask used to select sub-directories, after hidden-mode substitution.
        exclusion_rules: Optional pattern rules consulted for every sub-directory.
    """

    base_path: str
    exclude_paths: Tuple[str, ...] = ()
    include_hidden: bool = False
    mask: str = "*"
    exclusion_rules: Optional[BaseExclusionRules] = None


class BasePathRegistry:
    """Bidirectional mapping between integer identifiers and base paths.

    Identifiers are non-negative and, unless supplied explicitly, allocated as the
    smallest integer not currently bound. A binding never changes once made: binding an
    already known path or identifier fails instead of merging.

    Example:
        >>> registry = BasePathRegistry()
        >>> registry.bind("/a/")
        0
        >>> registry.bind("/c/", base_id=2)
        2
        >>> registry.bind("/b/")
        1
        >>> registry.path_of(2)
        '/c/'
    """

    def __init__(self) -> None:
        self._paths: Dict[int, str] = {}
        self._ids: Dict[str, int] = {}

    def next_free_id(self) -> int:
        base_id = 0
        while base_id in self._paths:
            base_id += 1
        return base_id

    def check_available(self, path: str, base_id: Optional[int] = None) -> None:
        """Raise if ``path`` or ``base_id`` is already bound.

        Raises:
            ValueError: If ``base_id`` is not a non-negative integer.
            DuplicateBasePath: If ``path`` is already registered.
            DuplicateIdentifier: If ``base_id`` is already bound to another path.
        """
        if base_id is not None and (isinstance(base_id, bool) or not isinstance(base_id, int) or base_id < 0):
            raise ValueError(f"Base identifiers are non-negative integers, got: {base_id!r}")
        if path in self._ids:
            raise DuplicateBasePath(path, self._ids[path])
        if base_id is not None and base_id in self._paths:
            raise DuplicateIdentifier(base_id, self._paths[base_id])

    def bind(self, path: str, base_id: Optional[int] = None) -> int:
        """Bind ``path`` to ``base_id``, or to the smallest free identifier.

        Returns:
            The identifier now bound to ``path``.
        """
        self.check_available(path, base_id)
        if base_id is None:
            base_id = self.next_free_id()
        self._paths[base_id] = path
        self._ids[path] = base_id
        return base_id

    def release(self, base_id: int) -> None:
        """Undo a binding made by a registration that failed before completing."""
        path = self._paths.pop(base_id)
        del self._ids[path]

    def path_of(self, base_id: int) -> str:
        return self._paths[base_id]

    def id_of(self, path: str) -> Optional[int]:
        return self._ids.get(path)

    def as_dict(self) -> Dict[int, str]:
        return dict(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._ids

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return iter(list(self._paths.items()))

    def __len__(self) -> int:
        return len(self._paths)
