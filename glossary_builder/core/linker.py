"""
Term cross-linking.

Rewrites every definition so that each standalone token equal to a known term
becomes a hyperlink to that term's page. Works on an immutable Glossary and
returns a new one.
"""
from typing import AbstractSet, Any, Dict, Tuple
import logging

from .interfaces import ITermLinker
from .models import Glossary, PAGE_EXTENSION, WORD_SEPARATORS
from .tokenizer import next_token


logger = logging.getLogger(__name__)


def make_term_link(term: str, extension: str = PAGE_EXTENSION) -> str:
    """Anchor markup pointing at the term's own page."""
    return f'<a href="{term}{extension}">{term}</a>'


def link_definition(
    definition: str,
    term: str,
    separators: AbstractSet[str] = WORD_SEPARATORS,
    extension: str = PAGE_EXTENSION
) -> Tuple[str, int]:
    """
    Link every standalone occurrence of one term inside a definition.

    Matching is exact and case-sensitive on whole tokens. After a replacement
    the scan resumes after the inserted markup, so the markup is never scanned
    again in the same pass.

    Args:
        definition: Definition text to scan
        term: Term to link
        separators: Token boundary characters
        extension: Page file extension used in link targets

    Returns:
        Tuple of (new definition, number of links inserted)
    """
    link = make_term_link(term, extension)
    position = 0
    count = 0

    while position < len(definition):
        token = next_token(definition, position, separators)
        if token == term:
            definition = definition[:position] + link + definition[position + len(token):]
            count += 1
            # Never rescan inserted markup
            position += len(link)
        else:
            position += len(token)

    return definition, count


class TermLinker(ITermLinker):
    """
    Cross-links all definitions of a glossary.

    Terms are processed in alphabetical order; for each definition every term
    is applied in alphabetical order, each pass working on the previous
    result.
    """

    def __init__(
        self,
        separators: AbstractSet[str] = WORD_SEPARATORS,
        link_self: bool = True,
        extension: str = PAGE_EXTENSION
    ):
        """
        Args:
            separators: Token boundary characters
            link_self: Link a term's own name inside its definition
            extension: Page file extension used in link targets
        """
        self.separators = frozenset(separators)
        self.link_self = link_self
        self.extension = extension
        self._stats = {'definitions': 0, 'links': 0}

    def link(self, glossary: Glossary) -> Glossary:
        linked: Dict[str, str] = {}
        total = 0

        for term in glossary.terms:
            linked[term], count = self._link_term(glossary, term)
            total += count
            logger.debug(f"Linked definition of '{term}' ({count} links)")

        self._stats['definitions'] += len(glossary)
        self._stats['links'] += total
        logger.info(f"Cross-linked {len(glossary)} definitions ({total} links)")

        return glossary.with_definitions(linked)

    def count_links(self, glossary: Glossary) -> Dict[str, int]:
        """Number of links each definition would receive."""
        return {term: self._link_term(glossary, term)[1] for term in glossary.terms}

    def _link_term(self, glossary: Glossary, term: str) -> Tuple[str, int]:
        definition = glossary.definition(term)
        total = 0
        for other in glossary.terms:
            if other == term and not self.link_self:
                continue
            definition, count = link_definition(
                definition, other, self.separators, self.extension
            )
            total += count
        return definition, total

    def get_stats(self) -> Dict[str, Any]:
        return dict(self._stats)
