"""Snapshot layer.

This package provides point-in-time read views over key-value data.
It also builds views from logical fixture documents.
"""
