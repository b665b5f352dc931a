"""Command-line interface for scopetheme."""
