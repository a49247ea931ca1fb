"""A printf-style formatter producing bytes, with UTF-8 wide-character support and small text helpers."""

__version__ = "0.1.0"