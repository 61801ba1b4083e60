"""Storefront - e-commerce backend helpers.

Password hashing, bearer tokens and a strategy-based authentication gate,
image uploads, purchase summary emails and a fake product catalog.
"""

__version__ = "0.1.0"
