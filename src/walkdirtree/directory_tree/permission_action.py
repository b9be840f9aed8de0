"""Policy for filesystem errors raised while a directory tree is being built."""

from enum import Enum


class PermissionAction(str, Enum):
    """Action to take when a directory cannot be read during a tree build.

    Values:
        RAISE: Roll back everything the failing ``add_base`` call registered and
            re-raise the error (default behavior)
        IGNORE: Keep the unreadable directory registered, skip its contents and continue
    """

    RAISE = "raise"
    IGNORE = "ignore"
