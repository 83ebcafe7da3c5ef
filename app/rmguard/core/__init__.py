"""Core configuration and path management for rmguard."""
