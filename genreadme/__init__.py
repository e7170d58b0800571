"""Generate README files from package.json metadata."""

__version__ = "0.1.0"

__all__ = ["__version__"]
