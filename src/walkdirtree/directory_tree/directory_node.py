"""Node representation of a directory in a built tree."""

from typing import Any, Dict, Optional

from anytree import Node


class DirectoryNode(Node):  # type: ignore
    """Node class representing one directory discovered during a tree build.

    Extends anytree.Node with the directory's absolute path and the identifier of the
    base path it belongs to. The nodes returned by ``DirectoryTree.add_base`` are
    informational: the authoritative state is the tree's flat directory registry.

    Attributes:
        name (str): Short name of the directory (the full base path for a root node).
        dir_path (str): Absolute path, forward slashes, trailing separator.
        base_id (int): Identifier of the owning base path.
        children (tuple[DirectoryNode]): Sub-directories (inherited from anytree.Node).

    Example:
        >>> root = DirectoryNode("/data/", dir_path="/data/", base_id=0)
        >>> logs = DirectoryNode("logs", parent=root, dir_path="/data/logs/", base_id=0)
        >>> root.to_mapping()
        {'logs': {}}
    """

    def __init__(
        self,
        name: str,
        parent: Optional["DirectoryNode"] = None,
        dir_path: str = "",
        base_id: int = 0,
        **kwargs: Any,
    ) -> None:
        super().__init__(name, parent, **kwargs)
        self.dir_path = dir_path
        self.base_id = base_id

    def to_mapping(self) -> Dict[str, Any]:
        """Return the subtree below this node as nested ``name -> subtree`` dicts.

        Example:
            >>> root = DirectoryNode("/r/", dir_path="/r/")
            >>> a = DirectoryNode("a", parent=root, dir_path="/r/a/")
            >>> _ = DirectoryNode("x", parent=a, dir_path="/r/a/x/")
            >>> _ = DirectoryNode("b", parent=root, dir_path="/r/b/")
            >>> root.to_mapping()
            {'a': {'x': {}}, 'b': {}}
        """
        return {child.name: child.to_mapping() for child in self.children}
