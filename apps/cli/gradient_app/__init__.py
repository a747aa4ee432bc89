"""Command-line entry point for the gradient renderer."""
