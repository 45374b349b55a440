"""Helpers for GitHub repository references."""

import re

GITHUB_HOST = "github.com"

_SLUG_RE = re.compile(r"^([A-Za-z0-9][A-Za-z0-9-]*)/([A-Za-z0-9._-]+)$")


def normalize_remote_url(url: str) -> str:
    """Normalize a git remote URL to an HTTPS base URL.

    Handles:
    - git@github.com:org/repo.git -> https://github.com/org/repo
    - https://github.com/org/repo.git -> https://github.com/org/repo
    - https://github.com/org/repo/ -> https://github.com/org/repo
    """
    url = url.strip().rstrip("/")
    # Strip .git suffix
    url = re.sub(r"\.git$", "", url)
    # Convert SSH to HTTPS
    ssh_match = re.match(r"git@([^:]+):(.+)", url)
    if ssh_match:
        host, path = ssh_match.groups()
        return f"https://{host}/{path}"
    return url


def parse_repo_reference(reference: str) -> tuple[str, str, str]:
    """Split a repository reference into (host, owner, repo).

    Accepts an ``owner/repo`` slug or an HTTPS/SSH remote URL.
    Raises ValueError for anything else.
    """
    value = reference.strip()
    slug_match = _SLUG_RE.match(value)
    if slug_match:
        owner, repo = slug_match.groups()
        return GITHUB_HOST, owner, re.sub(r"\.git$", "", repo)

    url_match = re.match(r"^https?://([^/]+)/([^/]+)/([^/]+)$", normalize_remote_url(value))
    if url_match:
        host, owner, repo = url_match.groups()
        return host, owner, repo

    raise ValueError(f"Not a repository URL or owner/repo slug: {reference!r}")


def repository_url(owner: str, repo: str, host: str = GITHUB_HOST) -> str:
    """Build the HTTPS clone URL for a repository."""
    return f"https://{host}/{owner}/{repo}.git"
