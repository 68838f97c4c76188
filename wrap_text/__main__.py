"""Allow ``python -m wrap_text`` to run the command-line interface."""

from wrap_text.cli.main import main

if __name__ == "__main__":
    main()
