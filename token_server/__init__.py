"""Room Token Server - mints LiveKit access tokens over HTTP."""

__version__ = "0.1.0"
