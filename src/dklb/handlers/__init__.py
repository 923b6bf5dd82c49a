"""Handler modules for the dklb operator."""

from . import admission

__all__ = ["admission"]
