"""
arcpath — helpers for slash-delimited paths inside archives.

Features:

- Pure functions that pad and trim a single leading/trailing separator to put a
  path in absolute ("/a/b/") or relative ("a/b/") directory-context form.
- Composition of a base and a context into one absolute path.
- An immutable ArchivePath value with parent lookup, plus root()/create() factories.

Paths here are archive-internal strings, never OS paths: nothing touches the
filesystem, ".." is not resolved, and runs of separators are left as given.
"""

__version__ = "0.1"

__all__ = [
    "constants",
    "errors",
    "pathutil",
    "path",
    "ArchivePath",
    "ArcPathError",
    "PathNotSpecifiedError",
    "create",
    "root",
]

from .errors import ArcPathError, PathNotSpecifiedError
from .path import ArchivePath, create, root
