"""Configuration — settings models, file discovery, and logging setup."""
