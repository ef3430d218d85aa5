"""Command-line commands for the kurdemy tool."""
