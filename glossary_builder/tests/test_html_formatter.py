"""
Tests for HTML page rendering.
"""
import re

import pytest

from glossary_builder.core.exceptions import TermNotFoundError
from glossary_builder.core.linker import TermLinker
from glossary_builder.core.models import Glossary
from glossary_builder.formatters.html_formatter import HtmlPageFormatter
from glossary_builder.parsers.text_parser import GlossaryTextParser


@pytest.fixture
def formatter():
    return HtmlPageFormatter()


def index_entries(html):
    return re.findall(r'<li>\s*<a href="([^"]*)\.html">([^<]*)</a>\s*</li>', html)


class TestRenderIndex:

    def test_exact_layout(self, formatter):
        assert formatter.render_index(["alpha"]) == (
            "<html>\n"
            "  <head>\n"
            "      <title>Glossary</title>\n"
            "  </head>\n"
            "  <body>\n"
            "      <h2>Glossary</h2>\n"
            "      <hr>\n"
            "      <h3>Index</h3>\n"
            "      <ul>\n"
            "          <li>\n"
            '              <a href="alpha.html">alpha</a>\n'
            "          </li>\n"
            "      </ul>\n"
            "  </body>\n"
            "</html>\n"
        )

    def test_entries_in_supplied_order(self, formatter):
        html = formatter.render_index(["b", "a", "c"])
        assert index_entries(html) == [("b", "b"), ("a", "a"), ("c", "c")]

    def test_each_term_once(self, formatter):
        terms = ["Zed", "alpha", "beta", "gamma"]
        entries = index_entries(formatter.render_index(terms))
        assert [text for _, text in entries] == terms

    def test_empty_index(self, formatter):
        html = formatter.render_index([])
        assert "      <ul>\n      </ul>\n" in html
        assert "<li>" not in html

    def test_custom_title_and_extension(self):
        formatter = HtmlPageFormatter(site_title="Terms", index_heading="All", extension=".htm")
        html = formatter.render_index(["x"])
        assert "<title>Terms</title>" in html
        assert "<h3>All</h3>" in html
        assert '<a href="x.htm">x</a>' in html


class TestRenderTermPage:

    def test_exact_layout(self, formatter):
        assert formatter.render_term_page("alpha", " first term") == (
            "<html>\n"
            "  <head>\n"
            "      <title>alpha</title>\n"
            "  </head>\n"
            "  <body>\n"
            '<h2><b><i><font color="red">alpha</font></i></b></h2>\n'
            "<blockquote> first term</blockquote>\n"
            "      <hr>\n"
            '<p>Return to <a href="index.html">index</a>.</p>\n'
            "  </body>\n"
            "</html>\n"
        )

    def test_empty_definition(self, formatter):
        html = formatter.render_term_page("lonely", "")
        assert "<blockquote></blockquote>" in html

    def test_definition_markup_inserted_verbatim(self, formatter):
        html = formatter.render_term_page("b", ' see <a href="a.html">a</a> & more')
        assert '<blockquote> see <a href="a.html">a</a> & more</blockquote>' in html

    def test_deterministic(self, formatter):
        assert formatter.render_term_page("x", " y") == formatter.render_term_page("x", " y")


class TestRenderSite:

    def test_index_then_terms(self, formatter, sample_lines):
        glossary = TermLinker().link(GlossaryTextParser().parse(sample_lines))
        pages = formatter.render_site(glossary)

        assert [page.name for page in pages] == ["index", "alpha", "beta"]
        assert '<a href="alpha.html">alpha</a>' in pages[2].text
        assert index_entries(pages[0].text) == [("alpha", "alpha"), ("beta", "beta")]

    def test_empty_glossary_has_only_index(self, formatter):
        pages = formatter.render_site(Glossary.empty())
        assert [page.name for page in pages] == ["index"]
        assert index_entries(pages[0].text) == []

    def test_custom_index_name(self):
        formatter = HtmlPageFormatter(index_name="home")
        pages = formatter.render_site(Glossary.from_mapping({"a": ""}))
        assert pages[0].name == "home"
        assert '<a href="home.html">home</a>' in pages[1].text

    def test_missing_definition_surfaces(self, formatter):
        class BrokenGlossary:
            terms = ("a",)

            def definition(self, term):
                raise TermNotFoundError("missing", term=term)

        with pytest.raises(TermNotFoundError):
            formatter.render_site(BrokenGlossary())
