"""Allow ``python -m ttyask`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m ttyask`` behaves identically to the ``ttyask`` console
script.
"""

from __future__ import annotations

from ttyask.cli.app import cli

if __name__ == "__main__":
    cli()
