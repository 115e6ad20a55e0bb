"""Cut semantic-version tags for applications in a shared helmfile repo."""

__version__ = "0.1.0"
