"""Core configuration for dirlist."""
