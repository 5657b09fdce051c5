"""Task List - a single-screen terminal task manager."""

__version__ = "0.1.0"
