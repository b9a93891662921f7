import logging

logger = logging.getLogger(__name__)


def relative_path(absolute_path: str, repo_name: str) -> str:
    """Path of a file relative to the repository root.

    Runners check a repository out at ``.../<repo>/<repo>/``, so a pair of
    consecutive ``<repo>`` segments marks the root. Without such a pair, the
    first single ``<repo>`` segment is used. Only whole path segments match.
    When the repository name does not appear at all the path is returned
    unchanged.
    """
    segments = absolute_path.split("/")
    matches = [i for i, segment in enumerate(segments[:-1]) if segment == repo_name]
    if not matches:
        logger.warning(f"Repository {repo_name!r} not found in {absolute_path}, using it as is")
        return absolute_path

    root = matches[0]
    for i in matches:
        if i + 1 in matches:
            root = i + 1
            break
    return "/".join(segments[root + 1:])
