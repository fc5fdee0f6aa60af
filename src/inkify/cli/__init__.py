"""Command-line preview tool for inkify."""
