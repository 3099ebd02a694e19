"""Core configuration, logging and metrics helpers."""
