"""Owner/housekeeper direct-messaging backend."""

__version__ = "1.0.0"
