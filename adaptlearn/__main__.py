"""Module entrypoint for `python -m adaptlearn`."""

from adaptlearn.cli.main import main

if __name__ == "__main__":
    main()
