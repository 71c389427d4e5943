"""tt - Generate a regular expression matching timestamps within an interval."""

from ._version import __version__
from .cli import main

__all__ = ['main', '__version__']
