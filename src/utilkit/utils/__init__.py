"""Support namespace for small, stateless helpers.

Scope:
- Pure functions with minimal dependencies (formatting, identifiers, strings,
  dates, sequences).
- No orchestration, no I/O, no wiring. The one networked helper lives in
  ``utilkit.fetch``, not here.
- Organized by single-purpose modules (``money.py``, ``ids.py``,
  ``slugify.py``, ...) rather than one catch-all file.

Import direction:
- May be imported by any utilkit package.
- Must not import from application packages other than ``utilkit.errors`` and
  the default constants in ``utilkit.config``.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules to avoid incidental coupling.
"""
