"""Version information for pathdoc."""

__version__ = "0.1.0"
