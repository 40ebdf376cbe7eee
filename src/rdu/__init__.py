"""rdu - disk usage for files and directory trees."""

__version__ = "0.3.0"
