"""AppointMe - booking and client management API for small businesses."""

__version__ = "0.1.0"
