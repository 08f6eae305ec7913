"""In-memory todo HTTP service"""

__version__ = "1.0.0"
