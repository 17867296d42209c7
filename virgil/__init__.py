"""Source language table and extraction of symbols, imports and comments from syntax trees."""

__version__ = "0.1.4"