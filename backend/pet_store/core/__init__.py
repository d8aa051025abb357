"""Configuration, errors, logging and request dependencies."""
