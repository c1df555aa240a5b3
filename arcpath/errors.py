class ArcPathError(Exception):
    """Base class for arcpath-specific errors."""


# Preconditions
class PathNotSpecifiedError(ArcPathError, ValueError):
    pass
