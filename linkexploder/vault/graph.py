"""Link index construction: outgoing links per note and their reverse."""

import logging

from ..models import LinkIndex, ReverseLinkIndex
from .loader import Vault

logger = logging.getLogger(__name__)


def build_link_index(vault: Vault) -> LinkIndex:
    """Map every note to the files it links to, with occurrence counts.

    Unresolved links are left out. Notes without links map to an empty dict.
    """
    index: LinkIndex = {}
    for note in vault.notes:
        targets = index.setdefault(note.path, {})
        for link in note.links:
            resolved = vault.resolve(link, note.path)
            if resolved is None:
                logger.debug("unresolved link %r in %s", link, note.path)
                continue
            targets[resolved] = targets.get(resolved, 0) + 1
    return index


def build_incoming_index(links: LinkIndex) -> ReverseLinkIndex:
    """Flip a link index so each path maps to the paths linking to it.

    Counts are not carried over; every value is 1.
    """
    incoming: ReverseLinkIndex = {}
    for linker, destinations in links.items():
        for path in destinations:
            incoming.setdefault(path, {})[linker] = 1
    return incoming
