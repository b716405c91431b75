"""Random, human-amusing commit messages for the command line."""

__version__ = "0.1.0"
