"""Configuration - environment resolution, sources and settings."""
