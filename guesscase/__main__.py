"""Allow running as `python -m guesscase`."""

from guesscase.cli import main

main()
