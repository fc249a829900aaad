"""
Macha Test Suite.

- unit/: Transformers, handlers, API routes, dashboard client and hooks
- notion_pages.py: Builders for raw Notion page objects
- conftest.py: Shared fixtures and test configuration

Run tests with: pytest
"""
