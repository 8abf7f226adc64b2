"""Configuration — settings sources and logging setup."""
