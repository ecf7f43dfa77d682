"""Click commands for the buildreqs CLI."""
