"""Business rules for booking a vacation rental property."""

__version__ = "0.1.0"
