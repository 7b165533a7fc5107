"""State/store layer.

This package is the single source of truth for how fetched messages and
server events are merged into the client's in-memory message cache, and
for which views get told about it.
"""
