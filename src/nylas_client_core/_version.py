"""Package version and the SDK name sent in the User-Agent header."""

__version__ = "0.1.0"

SDK_NAME = "Nylas Python SDK"
