"""Planning Reports — bucket classification and networth projection reports."""

__version__ = "0.1.0"
