"""Module entrypoint.

Allows:
    python -m logstalker --log-filename ... --credentials-file ...
"""

from __future__ import annotations

from logstalker.cli import main

if __name__ == "__main__":
    main()
