"""Builders for documentation records used across tests."""


def discussion_xml(*body: str) -> str:
    """Wrap discussion nodes in a root element."""
    return f"<Discussion>{''.join(body)}</Discussion>"


def details(summary: str, text: str) -> str:
    """Expected collapsible block for a callout with the given details."""
    return f"<details>\n<summary>{summary}</summary>\n\n{text}\n\n</details>"
