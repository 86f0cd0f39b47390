"""dropl - upload and list files from the command line."""

__version__ = "0.1.0"
