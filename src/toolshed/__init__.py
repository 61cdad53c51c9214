"""toolshed

Small, independent helpers: atomic file persistence, natural ordering and
set-like sequence operations, boolean-state coercion, duration parsing and an
owned shutdown sequence.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
