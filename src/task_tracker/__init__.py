"""Single-user task tracker with a numbered console menu."""

__version__ = "0.1.0"
