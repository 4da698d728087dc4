"""Command-line interface for isospline."""
