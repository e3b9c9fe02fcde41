"""crp – image color replace tool."""

__version__ = "1.0.0"
