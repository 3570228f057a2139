"""Adapters (infrastructure) for utilkit.

Concrete implementations of ``utilkit.interfaces`` contracts and builders for
third-party clients (the httpx transport used by ``utilkit.fetch``).

Dependency rule: may import ``utilkit.utils`` and ``utilkit.config``.
"""
