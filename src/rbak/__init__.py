"""rbak: copy a file to <name>.bak or a directory tree to <name>_bak."""

__version__ = "0.1.0"
