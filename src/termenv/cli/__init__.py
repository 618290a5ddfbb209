"""Command line interface for termenv."""
