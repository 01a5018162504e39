"""Zendesk Help Center retrieval: token-efficient article search and fetch."""

__version__ = "1.0.0"
