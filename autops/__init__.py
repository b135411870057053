"""Domain model for an automation platform: projects, templates, workflows, users, policies and an HTTP entry point."""

__version__ = "0.1.0"