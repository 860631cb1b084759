"""Git operations used by the release workflow.

Usage:
    from gitrelease.git import Repository

    repo = Repository(Path("."))
    subjects = repo.log_subjects("1.0.0..develop")
"""

from gitrelease.git.repository import GitError, Repository

__all__ = [
    "GitError",
    "Repository",
]
