"""minigrep: print the lines of a file that contain a query string."""

__version__ = "0.1.0"
