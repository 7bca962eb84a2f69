"""CLI subcommands for semrange."""
