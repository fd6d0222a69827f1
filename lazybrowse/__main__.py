"""Module entrypoint for ``python -m lazybrowse``.

All argument parsing and runtime setup happen in ``lazybrowse.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
