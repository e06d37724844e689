"""Run script.

Allows `python -m main` from inside `src/` during development, next to the
`mini-ssl` console script installed by pip.
"""

from __future__ import annotations

import sys

# Windows terminals default to cp1252; responses are printed as UTF-8 text.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
