"""Project name validation."""

import re
import unicodedata

# Characters GitHub keeps in repository names
_VALID_NAME_RE = re.compile(r"^[A-Za-z0-9._-]+$")


def is_valid_repo_name(name: str) -> bool:
    """Check that name is a single path component GitHub accepts unchanged."""
    if name in (".", "..") or name.endswith(".git"):
        return False
    return bool(_VALID_NAME_RE.match(name))


def suggest_repo_name(name: str) -> str:
    """Convert a free-form name to a GitHub-compatible repository name.

    Algorithm follows GitHub's own renaming:
    1. Strip accents
    2. Replace runs of anything not alphanumeric, dot, underscore or hyphen
       with a single hyphen
    3. Strip leading/trailing hyphens

    Examples:
        "My Project" -> "My-Project"
        "Café app!" -> "Cafe-app"
    """
    # Normalize unicode characters and drop combining marks
    text = unicodedata.normalize("NFKD", name)
    text = "".join(ch for ch in text if not unicodedata.combining(ch))
    text = re.sub(r"[^A-Za-z0-9._-]+", "-", text)
    return text.strip("-")
