"""Module entrypoint: ``python -m storenav``."""

from storenav.cli import main

if __name__ == "__main__":
    main()
