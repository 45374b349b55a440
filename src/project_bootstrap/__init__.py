"""Project bootstrapper: create a repository from a template or from scratch."""

__version__ = "0.1.0"
