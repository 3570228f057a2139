"""Integration tests for the timeout-guarded fetch."""
