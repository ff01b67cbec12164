"""
HTML page renderer for glossary sites.

Produces the index document and one document per term. Term and definition
text is inserted verbatim; definitions already carry link markup from the
cross-linker.
"""
from typing import List, Sequence
import logging

from ..core.interfaces import IPageFormatter
from ..core.linker import make_term_link
from ..core.models import (
    DEFAULT_SITE_TITLE,
    INDEX_PAGE_NAME,
    PAGE_EXTENSION,
    Glossary,
    SitePage,
)


logger = logging.getLogger(__name__)


class HtmlPageFormatter(IPageFormatter):
    """Renders glossary pages as minimal HTML documents."""

    def __init__(
        self,
        site_title: str = DEFAULT_SITE_TITLE,
        index_heading: str = "Index",
        index_name: str = INDEX_PAGE_NAME,
        extension: str = PAGE_EXTENSION
    ):
        self.site_title = site_title
        self.index_heading = index_heading
        self.index_name = index_name
        self.extension = extension

    def render_index(self, terms: Sequence[str]) -> str:
        """
        Render the index document.

        Args:
            terms: Terms to list, in display order

        Returns:
            HTML text with one linked list entry per term
        """
        lines = [
            "<html>",
            "  <head>",
            f"      <title>{self.site_title}</title>",
            "  </head>",
            "  <body>",
            f"      <h2>{self.site_title}</h2>",
            "      <hr>",
            f"      <h3>{self.index_heading}</h3>",
            "      <ul>",
        ]
        for term in terms:
            lines.extend([
                "          <li>",
                f"              {make_term_link(term, self.extension)}",
                "          </li>",
            ])
        lines.extend([
            "      </ul>",
            "  </body>",
            "</html>",
        ])
        return self._join(lines)

    def render_term_page(self, term: str, definition: str) -> str:
        """
        Render the document for one term.

        Args:
            term: Term shown as title and heading
            definition: Cross-linked definition; may be empty

        Returns:
            HTML text with a link back to the index
        """
        index_link = f'<a href="{self.index_name}{self.extension}">{self.index_name}</a>'
        lines = [
            "<html>",
            "  <head>",
            f"      <title>{term}</title>",
            "  </head>",
            "  <body>",
            f'<h2><b><i><font color="red">{term}</font></i></b></h2>',
            f"<blockquote>{definition}</blockquote>",
            "      <hr>",
            f"<p>Return to {index_link}.</p>",
            "  </body>",
            "</html>",
        ]
        return self._join(lines)

    def render_site(self, glossary: Glossary) -> List[SitePage]:
        """Index page first, then one page per term in alphabetical order."""
        pages = [SitePage(self.index_name, self.render_index(glossary.terms))]
        for term in glossary.terms:
            pages.append(SitePage(term, self.render_term_page(term, glossary.definition(term))))

        logger.debug(f"Rendered {len(pages)} pages")
        return pages

    def get_formatter_info(self):
        return {
            **super().get_formatter_info(),
            'site_title': self.site_title,
            'extension': self.extension,
        }

    @staticmethod
    def _join(lines: List[str]) -> str:
        return "\n".join(lines) + "\n"
