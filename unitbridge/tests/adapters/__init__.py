"""Tests for reporter adapter implementations."""
