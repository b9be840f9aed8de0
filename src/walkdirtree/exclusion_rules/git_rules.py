"""Directory exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

from pathspec import PathSpec
from pathspec.patterns import GitWildMatchPattern  # type: ignore

from walkdirtree.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Directory exclusion rules written in .gitignore syntax.

    Complements the path/mask exclusion specifiers of ``DirectoryTree.add_base`` with
    patterns that apply at any depth, such as ``node_modules/`` or ``**/__pycache__/``.
    Matching is delegated to the pathspec library so that negation (``!``), anchoring
    (leading ``/``) and ``**`` behave the way Git treats them.

    Rules can be given inline, loaded from ignore files, or both.

    Attributes:
        spec (PathSpec): Compiled pattern matcher.

    Example:
        >>> rules = GitIgnoreExclusionRules(["node_modules/", "/dist/"])
        >>> rules.exclude("web/node_modules/")
        True
        >>> rules.exclude("dist/")
        True
        >>> rules.exclude("web/dist/")
        False
    """

    def __init__(
        self,
        patterns: Optional[Iterable[str]] = None,
        rules_files: Optional[Union[PathType, Sequence[PathType]]] = None,
    ):
        """Initialize the rules from inline patterns and/or ignore files.

        Args:
            patterns: Inline .gitignore patterns, one per item.
            rules_files: Path or paths of files containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self.spec = PathSpec.from_lines(GitWildMatchPattern, list(patterns or []))
        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str) -> bool:
        """Check a relative directory path (trailing ``/``) against the loaded patterns.

        Example:
            >>> rules = GitIgnoreExclusionRules(["build/", "!keep/build/"])
            >>> rules.exclude("src/build/")
            True
            >>> rules.exclude("keep/build/")
            False
        """
        return bool(self.spec.match_file(path))

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Append the patterns found in one or more ignore files.

        Later patterns can override earlier ones through negation.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                lines = f.read().splitlines()

            self._extend(PathSpec.from_lines(GitWildMatchPattern, lines).patterns)

    def add_rule(self, rule: str) -> None:
        """Append a single .gitignore pattern.

        Example:
            >>> rules = GitIgnoreExclusionRules()
            >>> rules.add_rule("**/__pycache__/")
            >>> rules.exclude("pkg/sub/__pycache__/")
            True
        """
        self._extend([GitWildMatchPattern(rule)])

    def has_rules(self) -> bool:
        return len(self.spec.patterns) > 0

    def _extend(self, patterns: Iterable[GitWildMatchPattern]) -> None:
        # Recompile so pattern order, and therefore negation precedence, is preserved
        self.spec = PathSpec(list(self.spec.patterns) + list(patterns))
