"""
Store Admin - configuration backend for online stores.
"""

__version__ = "0.1.0"
