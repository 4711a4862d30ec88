"""Configuration and per-run settings."""
