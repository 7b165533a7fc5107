"""Ingestion layer.

This package contains adapters that receive data from the server (the
event queue) and hand it, in arrival order, to the message store.
"""

__all__: list[str] = []
