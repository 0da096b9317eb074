"""Interface layer for modpaths (command-line entry points)."""
