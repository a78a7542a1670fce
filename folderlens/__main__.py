"""Module entrypoint for ``python -m folderlens``.

All argument parsing and runtime setup happen in ``folderlens.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
