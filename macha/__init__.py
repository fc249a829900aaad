"""
Macha - Campaign Analytics Dashboard Backend

Notion-backed data layer for the Macha marketing dashboard: normalization
handlers served over HTTP plus the client-side fetch layer that consumes them.
"""

__version__ = "0.1.0"
