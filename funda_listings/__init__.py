"""Funda listings: search the Funda mobile API and resolve listing details."""

__version__ = "0.1.0"
