"""Module entrypoint for ``python -m notepane``.

All argument parsing and runtime setup happen in ``notepane.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
