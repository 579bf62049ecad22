"""Main entry point for fountainview CLI when run as a module."""

from fountainview.cli.main import main

if __name__ == "__main__":  # pragma: no cover
    main()
