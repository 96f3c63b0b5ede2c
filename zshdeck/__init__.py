"""zshdeck — manage zsh aliases, functions and plugins as structured records."""

__version__ = "0.1.0"
