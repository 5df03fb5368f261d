# tests/integration/__init__.py

"""Integration tests for typed_json

These tests load real files from disk and read them the way a game would at
startup, combining loaders, accessors and the Result wrappers.
"""
