"""Vault loading and link index utilities."""

from .loader import load_vault, Vault
from .parser import extract_frontmatter_links, extract_links
from .graph import build_incoming_index, build_link_index

__all__ = [
    "load_vault",
    "Vault",
    "extract_frontmatter_links",
    "extract_links",
    "build_incoming_index",
    "build_link_index",
]
