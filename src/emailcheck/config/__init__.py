"""Configuration — TOML models, discovery, settings, and logging."""
