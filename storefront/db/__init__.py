"""Database package: engine, sessions and connection state."""
