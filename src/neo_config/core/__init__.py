"""Core layer for neo-config: the exception hierarchy shared by every component."""
