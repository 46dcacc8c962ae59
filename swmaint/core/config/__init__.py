"""Configuration — built-in catalog, override recipes and YAML loader."""
