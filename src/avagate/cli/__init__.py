"""avagate command-line interface."""
