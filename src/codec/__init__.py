"""Key encoding layer.

This package maps logical metadata identifiers onto raw store keys.
It hides the byte-level layout from the catalog reader.
"""
