"""Entry point for running uhd-helper as a module."""

from .cli import main

if __name__ == "__main__":
    main()
