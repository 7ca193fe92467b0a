"""Menu selection engine (matching, session state, options) and the stest file filter."""

__version__ = "5.4.0"
__all__ = ["config", "matching", "options", "session", "stest", "util"]