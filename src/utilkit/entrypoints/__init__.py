"""Entrypoints (inbound adapters) for utilkit.

Expose the helpers to the outside world as CLI commands. Parse and validate
inputs, call the helpers, and present results: data on stdout, notices on
stderr.
"""
