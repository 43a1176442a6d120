"""Accessible, Radix-style UI components rendered to HTML, with a demo page and WSGI server."""

__version__ = "0.1.0"