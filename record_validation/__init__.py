"""Record validation service for Employee and Staff records."""

__version__ = "1.0.0"
