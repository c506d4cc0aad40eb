"""Configuration, logging and small utilities."""
