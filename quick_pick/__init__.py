"""Quick Pick: fuzzy substring and acronym ranking for command palettes."""

__version__ = "0.1.0"
