"""Configuration: defaults, layered loading and validation."""
