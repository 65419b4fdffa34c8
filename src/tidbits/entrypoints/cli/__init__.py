"""The ``tidbits`` command line."""
