"""Command line tools for Pacsnek."""
