"""Configuration: TOML discovery, section models, settings, logging."""
