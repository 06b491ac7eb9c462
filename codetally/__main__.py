"""Module entrypoint for ``python -m codetally``.

All argument parsing and scan setup happen in ``codetally.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
