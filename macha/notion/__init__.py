"""Notion integration: database query client and property readers."""

from macha.notion.client import NotionClient

__all__ = ["NotionClient"]
