"""Dashboard backend and tooling for an education agency."""

__version__ = "0.1.0"
