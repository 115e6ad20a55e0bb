"""Git operations module.

Usage:
    from hfr.git import Repository

    repo = Repository(Path("."))
    match repo.tags():
        case Ok(tags):
            print(tags)
        case Err(e):
            print(e.message)
"""

from hfr.git.repository import (
    GitError,
    Repository,
)

__all__ = [
    "GitError",
    "Repository",
]
