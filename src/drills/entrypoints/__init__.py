"""Entrypoints (inbound adapters) for DRILLS.

Expose the library to the outside world through the `drills` command. Parse
and validate inputs, call domain and service operations, and present results.
"""
