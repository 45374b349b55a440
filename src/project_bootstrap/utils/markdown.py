"""Markdown content for freshly initialized repositories."""


def render_readme(name: str, description: str = "") -> str:
    """Render the seed README: a title heading and an optional paragraph."""
    content = f"# {name}\n"
    if description.strip():
        content += f"\n{description.strip()}\n"
    return content
