"""An interactive shell with pipelines, redirection, aliases, history and a themed prompt."""

__version__ = "0.1.0"