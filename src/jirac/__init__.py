"""jirac - summarise your commits as an issue tracker comment."""

__version__ = "0.1.0"
