from os import PathLike
from typing import Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]

# Mask used when no mask is given; matches every name not starting with a dot
DEFAULT_MASK = "*"

# Substituted for DEFAULT_MASK in hidden-inclusive mode: empty or dot prefix, then anything
HIDDEN_MASK = "{,.}*"
