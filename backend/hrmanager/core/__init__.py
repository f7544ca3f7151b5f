"""Configuration, logging, errors and shared messages."""
