"""bigsum: exact addition of arbitrarily long signed decimal integers."""

__version__ = "0.1.0"
