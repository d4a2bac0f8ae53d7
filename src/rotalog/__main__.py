"""Module entrypoint.

Allows:
    python -m rotalog "User {{user}} logged in" -c user=admin
"""

from __future__ import annotations

from rotalog.cli import main

if __name__ == "__main__":
    main()
