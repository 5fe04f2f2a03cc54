"""Configuration layer: TOML models, settings, discovery, and logging."""
