"""CarCheck: UK vehicle registration lookup proxy and report client."""

__version__ = "1.0.0"
