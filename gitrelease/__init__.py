"""Semantic-version release workflow on top of git and git-flow."""

__version__ = "0.1.0"
