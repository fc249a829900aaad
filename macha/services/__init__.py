"""Normalization handlers backing the HTTP API."""

from macha.services.records import fetch_campaigns, fetch_mentions, fetch_seeding

__all__ = ["fetch_campaigns", "fetch_mentions", "fetch_seeding"]
