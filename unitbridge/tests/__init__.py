"""Test suite for unitbridge.

Organized into three categories:

1. core/: Unit tests for discovery, metadata, location and execution
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for reporter implementations

3. fakes/: Port implementations for testing
   - In-memory RegistryPort and ReporterPort
"""
