from abc import ABC, abstractmethod


class BaseExclusionRules(ABC):
    """
    Abstract base class for rules that prune directories while a tree is built.

    Rules are consulted once per discovered sub-directory with that directory's path
    relative to its base path, using forward slashes and a trailing ``/`` (for example
    ``"src/build/"``). A directory for which :meth:`exclude` returns True is skipped
    together with its entire subtree, exactly like a resolved exclusion path.

    Example:
        >>> class SkipTmp(BaseExclusionRules):
        ...     def exclude(self, path: str) -> bool:
        ...         return path.rstrip("/").endswith("tmp")
        >>> SkipTmp().exclude("cache/tmp/")
        True
        >>> SkipTmp().exclude("src/")
        False
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine whether a directory should be left out of the tree.

        Args:
            path (str): Directory path relative to the base path, forward slashes,
                trailing ``/``.

        Returns:
            bool: True if the directory and everything below it should be skipped.
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Rule types that cannot be extended one rule at a time keep this default.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
