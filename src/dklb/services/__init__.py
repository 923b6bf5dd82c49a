"""Business logic services for dklb."""

from . import edgelb
from . import naming

__all__ = ["edgelb", "naming"]
