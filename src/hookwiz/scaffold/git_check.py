from git import Repo
from git.exc import InvalidGitRepositoryError, NoSuchPathError


def ensure_git_repository(directory: str) -> str:
    """Return the working tree root of the Git repository containing directory.

    husky installs its hooks into the repository, so scaffolding outside
    one cannot succeed.

    Raises:
        RuntimeError: If directory is not inside a Git repository.
    """
    try:
        repo = Repo(directory, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        raise RuntimeError(f"Error: {directory} is not in a Git repository")
    return repo.working_tree_dir
