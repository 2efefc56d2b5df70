"""Schema catalog layer.

This package decodes database and table metadata from a snapshot.
It is a read-only view with no caching or write path.
"""
