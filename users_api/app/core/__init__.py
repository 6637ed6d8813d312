"""Core infrastructure: settings, logging, errors and persistence."""
