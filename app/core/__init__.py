"""Configuration, database and request plumbing."""
