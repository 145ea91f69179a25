"""
Top‑level package for the Students API.

The HTTP service lives under ``app``; ``client`` holds a small
``requests`` based client for it.
"""

__version__ = "1.0.0"
