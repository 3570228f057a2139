"""Interfaces (application boundary) for utilkit.

Framework-free contracts (ABCs) implemented by ``utilkit.adapters``.

Dependency rule: this package is independent; do not import from any
``utilkit.*`` modules.
"""
