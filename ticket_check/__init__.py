"""Ticket check: keep pull request titles tied to a tracking ticket."""

__version__ = "0.1.0"
