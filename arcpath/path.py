from __future__ import annotations

import functools
from typing import Optional, Union

from .constants import SEPARATOR
from .pathutil import compose_absolute_context, get_parent, optionally_prepend_slash


@functools.total_ordering
class ArchivePath:
    """A location inside an archive, always held in absolute form.

    The stored context gets a preceding slash if it lacks one (``None`` becomes
    the root). Trailing slashes are kept as given. Instances are immutable and
    compare by value.
    """

    SEPARATOR = SEPARATOR

    __slots__ = ("_context",)

    def __init__(self, context: Optional[str] = None):
        self._context = optionally_prepend_slash(context)

    @classmethod
    def compose(cls, base: Union[str, ArchivePath], context: Union[str, ArchivePath]) -> ArchivePath:
        """Build ``context`` under ``base``; ``("base", "context")`` gives ``/base/context``."""
        return cls(compose_absolute_context(_context_of(base), _context_of(context)))

    def get(self) -> str:
        return self._context

    @property
    def parent(self) -> Optional[ArchivePath]:
        return get_parent(self)

    def __eq__(self, other):
        if not isinstance(other, ArchivePath):
            return NotImplemented
        return self._context == other._context

    def __lt__(self, other):
        if not isinstance(other, ArchivePath):
            return NotImplemented
        return self._context < other._context

    def __hash__(self):
        return hash(self._context)

    def __str__(self):
        return self._context

    def __repr__(self):
        return f"{type(self).__name__}({self._context!r})"


def root() -> ArchivePath:
    return ArchivePath()


def create(context: Union[str, ArchivePath, None], base: Union[str, ArchivePath, None] = None) -> ArchivePath:
    """Create a path from ``context``, optionally nested under ``base``."""
    if base is None:
        return ArchivePath(_context_of(context))
    return ArchivePath.compose(base, context)


def _context_of(value: Union[str, ArchivePath, None]) -> Optional[str]:
    if isinstance(value, ArchivePath):
        return value.get()
    return value
