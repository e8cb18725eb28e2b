"""Find and kill the processes bound to a network port."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("killport")
except PackageNotFoundError:  # Running from a source checkout without installation
    __version__ = "dev"

__all__ = ["__version__"]
