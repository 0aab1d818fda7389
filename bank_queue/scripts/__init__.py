"""Command-line scripts for the bank queue simulation."""
