"""astroframe - Sky positions, proper motions and the vector algebra between them."""

# Re-export subpackages for convenience
from astroframe import domain
from astroframe._version import __version__

__all__ = [
    "__version__",
    "domain",
]
