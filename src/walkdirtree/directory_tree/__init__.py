"""Directory tree model: base path registry, tree build and cached file enumeration."""
