"""Configuration — package defaults, YAML files and environment."""
