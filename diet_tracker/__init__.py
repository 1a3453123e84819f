"""Diet & Lifestyle Tracker client package."""

__version__ = "1.0.0"
