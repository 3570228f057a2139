"""utilkit test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : The fetch helper driven end to end through fake httpx transports.
- e2e/          : The ``utilkit`` command line through click's CliRunner.
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic; pass seeded ``random.Random`` and explicit
  ``now`` values instead of patching globals.
- No real network: transports are ``httpx.MockTransport`` or the scripted fake
  in ``tests/helpers/transports.py``.
- Async code is driven with ``asyncio.run`` from plain test functions.
- Property-based tests use @pytest.mark.property.
"""
