"""Building and reading X.509 certificate extensions and parsing DER certificates."""

__version__ = "0.1.0"