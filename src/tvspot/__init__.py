"""Live TV program image resolution for the media catalog."""

__version__ = "0.1.0"
