"""Package entry point.

Preferred invocation is via the installed console script:

    tabular-ingest ...

For convenience we also support:

    python -m tabular_ingest ...
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m tabular_ingest`."""

    app()


if __name__ == "__main__":
    main()
