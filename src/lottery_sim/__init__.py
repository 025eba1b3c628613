"""
Lottery simulator state package.

The persistence subpackage owns everything that touches stored data: the
storage abstraction, the record validators, schema migration and the CRUD
helpers for the game state and draw history.
"""

from importlib.metadata import version, PackageNotFoundError

__all__ = ["__version__"]

try:
    __version__ = version("lottery-sim")
except PackageNotFoundError:  # pragma: no cover - during tests without packaging
    __version__ = "0.0.0"
