"""
Tests for writing pages to disk.
"""
import pytest

from glossary_builder.core.exceptions import OutputError
from glossary_builder.core.models import SitePage
from glossary_builder.formatters.site_writer import SiteWriter


class TestSiteWriter:

    def test_writes_pages(self, temp_dir):
        out = temp_dir / "site"
        writer = SiteWriter(out)
        paths = writer.write([SitePage("index", "<html>i</html>\n"), SitePage("alpha", "a\n")])

        assert paths == [out / "index.html", out / "alpha.html"]
        assert (out / "index.html").read_text(encoding="utf-8") == "<html>i</html>\n"
        assert (out / "alpha.html").read_text(encoding="utf-8") == "a\n"

    def test_creates_nested_directory(self, temp_dir):
        out = temp_dir / "a" / "b"
        SiteWriter(out).write_page(SitePage("index", ""))
        assert (out / "index.html").exists()

    def test_custom_extension(self, temp_dir):
        path = SiteWriter(temp_dir, extension=".htm").write_page(SitePage("x", ""))
        assert path.name == "x.htm"

    def test_term_with_spaces_is_allowed(self, temp_dir):
        path = SiteWriter(temp_dir).write_page(SitePage("ice cream", "y"))
        assert path == temp_dir / "ice cream.html"

    @pytest.mark.parametrize("name", ["", ".", "..", "../evil", "a/b", "a\\b"])
    def test_unsafe_names_rejected(self, temp_dir, name):
        with pytest.raises(OutputError):
            SiteWriter(temp_dir).write_page(SitePage(name, ""))

    def test_unsafe_name_aborts_before_writing(self, temp_dir):
        writer = SiteWriter(temp_dir)
        with pytest.raises(OutputError):
            writer.write([SitePage("index", ""), SitePage("a/b", "")])
        assert not (temp_dir / "index.html").exists()

    def test_overwrite_disabled(self, temp_dir):
        (temp_dir / "index.html").write_text("old", encoding="utf-8")
        with pytest.raises(OutputError) as exc_info:
            SiteWriter(temp_dir, overwrite=False).write_page(SitePage("index", "new"))
        assert "index.html" in exc_info.value.output_path
        assert (temp_dir / "index.html").read_text(encoding="utf-8") == "old"

    def test_overwrite_enabled(self, temp_dir):
        (temp_dir / "index.html").write_text("old", encoding="utf-8")
        SiteWriter(temp_dir).write_page(SitePage("index", "new"))
        assert (temp_dir / "index.html").read_text(encoding="utf-8") == "new"

    def test_os_error_is_wrapped(self, temp_dir):
        blocker = temp_dir / "file"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(OutputError) as exc_info:
            SiteWriter(blocker / "site").write_page(SitePage("index", ""))
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_colliding_names_abort_before_writing(self, temp_dir):
        writer = SiteWriter(temp_dir)
        pages = [SitePage("index", "list"), SitePage("alpha", "a"), SitePage("index", "term")]
        with pytest.raises(OutputError, match="both be written"):
            writer.write(pages)
        assert list(temp_dir.iterdir()) == []
