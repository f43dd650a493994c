"""Markdown parsing utilities for wiki-links and markdown links."""

import re
from urllib.parse import unquote

# Match [[target]], [[target|display]], [[target#section]], [[target#section|display]]
WIKILINK_PATTERN = re.compile(r"\[\[([^\]|#]+)(?:#[^\]|]*)?(?:\|[^\]]+)?\]\]")

# Match [text](target) and [text](target "title"); embeds (![...]) match too
MARKDOWN_LINK_PATTERN = re.compile(r"\[[^\]]*\]\(\s*<?([^)\s>]+)>?(?:\s+\"[^\"]*\")?\s*\)")

URL_SCHEME_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")


def extract_wikilinks(content: str) -> list[str]:
    """Extract wiki-link targets, one entry per occurrence."""
    return [match.strip() for match in WIKILINK_PATTERN.findall(content) if match.strip()]


def extract_markdown_links(content: str) -> list[str]:
    """Extract local markdown link targets, one entry per occurrence.

    External URLs and same-note anchors are skipped; targets are
    percent-decoded and stripped of any #anchor.
    """
    result = []
    for match in MARKDOWN_LINK_PATTERN.findall(content):
        if URL_SCHEME_PATTERN.match(match):
            continue
        target = unquote(match.split("#", 1)[0]).strip()
        if target:
            result.append(target)
    return result


def extract_links(content: str) -> list[str]:
    """Extract all link targets from markdown content.

    Targets are returned as written (not resolved), in document order,
    wiki-links first.
    """
    return extract_wikilinks(content) + extract_markdown_links(content)


def extract_frontmatter_links(frontmatter: dict) -> list[str]:
    """Extract wiki-links from frontmatter values.

    Values can be:
    - A string: "[[Other]]"
    - A list of strings: ["[[Concept#Section]]", "[[Other]]"]
    - Nested mappings of the above
    """
    result = []
    for value in frontmatter.values():
        result.extend(_links_in_value(value))
    return result


def _links_in_value(value) -> list[str]:
    if isinstance(value, str):
        return extract_wikilinks(value)
    if isinstance(value, list):
        links = []
        for item in value:
            links.extend(_links_in_value(item))
        return links
    if isinstance(value, dict):
        return extract_frontmatter_links(value)
    return []
