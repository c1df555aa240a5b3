"""Adjust slash-delimited archive paths into absolute or relative forms.

Only a single leading or trailing separator is ever added or removed. Runs of
separators inside a path (``"a//b"``, ``"//a"``) are left exactly as given.
"""

from __future__ import annotations

from typing import Optional, TypeVar

from .constants import EMPTY, ROOT, SEPARATOR
from .errors import PathNotSpecifiedError


P = TypeVar("P")


def compose_absolute_context(base: str, context: str) -> str:
    """Join ``context`` onto ``base`` in absolute form.

    ``compose_absolute_context("base", "context")`` gives ``"/base/context"``.
    """
    _assert_specified(base)
    _assert_specified(context)
    return adjust_to_absolute_directory_context(base) + optionally_remove_preceding_slash(context)


def adjust_to_relative_directory_context(path: Optional[str]) -> Optional[str]:
    """Drop a preceding slash and ensure a trailing one. ``None`` is returned as-is."""
    if path is None:
        return None
    return optionally_append_slash(optionally_remove_preceding_slash(path))


def adjust_to_absolute_directory_context(path: Optional[str]) -> Optional[str]:
    """Ensure both a preceding and a trailing slash. ``None`` is returned as-is."""
    if path is None:
        return None
    return optionally_append_slash(optionally_prepend_slash(path))


def optionally_remove_preceding_slash(path: str) -> str:
    _assert_specified(path)
    if _is_first_char_slash(path):
        return path[1:]
    return path


def optionally_remove_following_slash(path: str) -> str:
    _assert_specified(path)
    if _is_last_char_slash(path):
        return path[:-1]
    return path


def optionally_append_slash(path: str) -> str:
    _assert_specified(path)
    if not _is_last_char_slash(path):
        return path + SEPARATOR
    return path


def optionally_prepend_slash(path: Optional[str]) -> str:
    """Add a preceding slash if missing; ``None`` is treated as the empty string."""
    resolved = EMPTY if path is None else path
    if not _is_first_char_slash(resolved):
        return SEPARATOR + resolved
    return resolved


def get_parent(path: P) -> Optional[P]:
    """Return the parent of a path entity, or ``None`` at the top.

    ``path`` is any object with a ``get()`` returning its canonical string. The
    parent is built by calling ``type(path)`` with the parent string, so each call
    yields a new object. For ``"/my/path"`` (or ``"/my/path/"``) the parent is
    ``"/my"``; the root ``"/"`` and single-segment relative paths have none.
    """
    if path is None:
        raise PathNotSpecifiedError("Path must be specified")

    resolved = optionally_remove_following_slash(path.get())
    last = resolved.rfind(SEPARATOR)
    if last == -1 or resolved == ROOT:
        return None
    return type(path)(resolved[:last])


def _is_first_char_slash(path: str) -> bool:
    _assert_specified(path)
    if not path:
        return False
    return path[0] == SEPARATOR


def _is_last_char_slash(path: str) -> bool:
    _assert_specified(path)
    if not path:
        return False
    return path[-1] == SEPARATOR


def _assert_specified(path: Optional[str]) -> None:
    if path is None:
        raise PathNotSpecifiedError("Path must be specified")
