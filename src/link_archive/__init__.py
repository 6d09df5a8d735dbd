"""Archive links shared in a Discord thread as a static site."""

__version__ = "0.1.0"
