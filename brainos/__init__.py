"""Configuration loading, logging setup and a JSON-schema tool registry for agents."""

__version__ = "0.1.0"