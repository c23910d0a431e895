"""Command-line interface for the bookstore."""
