"""Repository tooling for guardclause.

Hosts guard scripts that enforce the codebase standards:
- No use of typing.Any or casts, and no inline type-checker ignores
- No bare except, and every handler re-raises
- No use of print; use centralized logging instead
- No exception-silencing context managers

Run them with `python -m tools.guard`.
"""
