"""Entrypoints (inbound adapters) for TIDBITS.

Expose the library to the outside world. Currently only the ``tidbits``
command line lives here; it parses and validates inputs, calls the pure
helpers and presents their results.
"""
