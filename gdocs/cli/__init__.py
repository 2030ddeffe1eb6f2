"""gdocs CLI - Command-line interface for Google Docs access."""
