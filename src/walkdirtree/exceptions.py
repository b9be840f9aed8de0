from typing import Any, Optional


class WalkDirTreeError(Exception):
    """
    Base class for all errors raised by walkdirtree.

    Every concrete error also derives from the closest builtin exception, so callers
    can catch either this hierarchy or the usual ``ValueError``/``TypeError`` family.

    Example:
        >>> issubclass(EmptyMask, WalkDirTreeError)
        True
    """

    pass


class NotADirectory(WalkDirTreeError, NotADirectoryError):
    """
    Exception raised when a base path does not exist or is not a directory.

    This is raised synchronously at registration time, before the registry is touched.

    Attributes:
        path (str): The base path as supplied by the caller.

    Example:
        >>> error = NotADirectory("/no/such/dir")
        >>> str(error)
        'basePath is not directory: /no/such/dir'
    """

    def __init__(self, path: Any) -> None:
        """
        Initialize the exception with the offending path.

        Args:
            path: The base path as supplied by the caller.
        """
        self.path = str(path)
        super().__init__(f"basePath is not directory: {self.path}")


class DuplicateBasePath(WalkDirTreeError, ValueError):
    """
    Exception raised when a base path is registered twice.

    Attributes:
        path (str): The canonical base path.
        base_id (int): The identifier the path is already bound to.

    Example:
        >>> error = DuplicateBasePath("/data/", 0)
        >>> str(error)
        'Base path already registered with id 0: /data/'
    """

    def __init__(self, path: str, base_id: int) -> None:
        """
        Initialize the exception with the path and its current identifier.

        Args:
            path: The canonical base path.
            base_id: The identifier the path is already bound to.
        """
        self.path = path
        self.base_id = base_id
        super().__init__(f"Base path already registered with id {base_id}: {path}")


class DuplicateIdentifier(WalkDirTreeError, ValueError):
    """
    Exception raised when an explicit base identifier is already bound.

    Attributes:
        base_id (int): The requested identifier.
        path (str): The base path the identifier is already bound to.

    Example:
        >>> error = DuplicateIdentifier(3, "/data/")
        >>> str(error)
        'Identifier 3 is already bound to: /data/'
    """

    def __init__(self, base_id: int, path: str) -> None:
        """
        Initialize the exception with the requested identifier and its current path.

        Args:
            base_id: The requested identifier.
            path: The base path the identifier is already bound to.
        """
        self.base_id = base_id
        self.path = path
        super().__init__(f"Identifier {base_id} is already bound to: {path}")


class InvalidSpecifier(WalkDirTreeError, TypeError):
    """
    Exception raised when an exclusion specifier is not a string.

    Validation happens before any filesystem access.

    Attributes:
        specifier: The rejected value.

    Example:
        >>> error = InvalidSpecifier(42)
        >>> str(error)
        'All patterns must have string type, got int: 42'
    """

    def __init__(self, specifier: Any) -> None:
        """
        Initialize the exception with the rejected specifier.

        Args:
            specifier: The value that is not a string.
        """
        self.specifier = specifier
        super().__init__(f"All patterns must have string type, got {type(specifier).__name__}: {specifier!r}")


class IncompatibleHiddenMask(WalkDirTreeError, ValueError):
    """
    Exception raised when hidden-inclusive mode is combined with a non-default mask.

    Hidden-inclusive mode is itself implemented by substituting the mask, so the two
    options cannot be combined.

    Attributes:
        mask (str): The mask that was supplied together with include_hidden.

    Example:
        >>> error = IncompatibleHiddenMask("*.py")
        >>> str(error)
        "include_hidden can be used only with the '*' mask, got: '*.py'"
    """

    def __init__(self, mask: str) -> None:
        """
        Initialize the exception with the rejected mask.

        Args:
            mask: The mask combined with include_hidden.
        """
        self.mask = mask
        super().__init__(f"include_hidden can be used only with the '*' mask, got: {mask!r}")


class EmptyMask(WalkDirTreeError, ValueError):
    """
    Exception raised when an empty mask string is passed to file enumeration.

    Example:
        >>> str(EmptyMask())
        'Mask must be a non-empty glob pattern'
    """

    def __init__(self, message: Optional[str] = None) -> None:
        """
        Initialize the exception with an optional custom message.

        Args:
            message: Overrides the default message when given.
        """
        super().__init__(message or "Mask must be a non-empty glob pattern")
