"""Unit tests for the adapter core.

These tests exercise discovery, metadata, location capture and the
execution bracket without a real host runner. Ports are replaced with
in-memory fakes from tests/fakes/.
"""
