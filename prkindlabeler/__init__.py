"""Sync /kind commands in pull request bodies to GitHub labels and enforce release notes."""

__version__ = "0.1.0"
__all__ = ["cli", "ghclient", "kinds", "labeler", "labels"]