"""Product catalogue with SQLite storage, a command line and a WSGI HTTP API."""

__version__ = "0.1.0"