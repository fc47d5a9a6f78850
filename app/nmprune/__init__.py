"""nmprune - find and remove node_modules directories to reclaim disk space."""

__version__ = "0.1.0"
