"""Folder watcher that runs YAML-profile-driven command pipelines over grouped files."""

__version__ = "0.1.0"