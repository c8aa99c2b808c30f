"""Core infrastructure: runtime mode, logging, security, push, reporting."""
