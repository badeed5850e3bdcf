"""Read-only analytics over users and their sessions."""
