"""Building blocks of a small top-down role-playing game: rules, inventory, battles, dialogue and menu."""

__version__ = "0.1.0"
__all__ = ["__version__"]