"""Command-line interface for appveyor-evu."""
