"""External adapters for the unitbridge runner.

This package provides implementations of the core port interfaces that
face the outside world.

Adapter Organization:

- reporter/: Adapters rendering example outcomes (collecting, progress)
"""
