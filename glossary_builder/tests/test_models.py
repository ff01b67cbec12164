"""
Tests for the glossary value object and build records.
"""
from datetime import datetime, timedelta
from pathlib import Path

import pytest

from glossary_builder.core.exceptions import InvalidGlossaryError, TermNotFoundError
from glossary_builder.core.models import BuildJob, BuildStatus, Glossary, SitePage


class TestGlossary:

    def test_from_mapping_sorts_terms(self):
        glossary = Glossary.from_mapping({"beta": " b", "Zed": " z", "alpha": " a"})
        # Codepoint order: uppercase before lowercase
        assert glossary.terms == ("Zed", "alpha", "beta")

    def test_definition_lookup(self):
        glossary = Glossary.from_mapping({"alpha": " first"})
        assert glossary.definition("alpha") == " first"

    def test_missing_term_raises_not_found(self):
        glossary = Glossary.from_mapping({"alpha": " first"})
        with pytest.raises(TermNotFoundError) as exc_info:
            glossary.definition("beta")
        assert exc_info.value.term == "beta"
        assert isinstance(exc_info.value, KeyError)

    def test_definitions_are_read_only(self):
        glossary = Glossary.from_mapping({"alpha": " first"})
        with pytest.raises(TypeError):
            glossary.definitions["alpha"] = "changed"

    def test_source_mapping_is_copied(self):
        source = {"alpha": " first"}
        glossary = Glossary.from_mapping(source)
        source["alpha"] = "changed"
        assert glossary.definition("alpha") == " first"

    def test_terms_must_match_definitions(self):
        with pytest.raises(InvalidGlossaryError):
            Glossary(terms=("alpha", "beta"), definitions={"alpha": ""})

    def test_terms_must_be_sorted(self):
        with pytest.raises(InvalidGlossaryError):
            Glossary(terms=("beta", "alpha"), definitions={"alpha": "", "beta": ""})

    def test_with_definitions_returns_new_glossary(self):
        glossary = Glossary.from_mapping({"alpha": " a"})
        updated = glossary.with_definitions({"alpha": " linked"})
        assert glossary.definition("alpha") == " a"
        assert updated.definition("alpha") == " linked"
        assert updated.terms == glossary.terms

    def test_with_definitions_cannot_change_term_set(self):
        glossary = Glossary.from_mapping({"alpha": " a"})
        with pytest.raises(InvalidGlossaryError):
            glossary.with_definitions({"alpha": " a", "beta": " b"})

    def test_container_protocol(self):
        glossary = Glossary.from_mapping({"b": "", "a": ""})
        assert len(glossary) == 2
        assert list(glossary) == ["a", "b"]
        assert "a" in glossary
        assert "c" not in glossary
        assert list(glossary.items()) == [("a", ""), ("b", "")]

    def test_empty(self):
        assert len(Glossary.empty()) == 0


class TestBuildRecords:

    def test_site_page_file_name(self):
        assert SitePage("alpha", "").file_name() == "alpha.html"
        assert SitePage("alpha", "").file_name(".htm") == "alpha.htm"

    def test_status_flags(self):
        assert BuildStatus.COMPLETED.is_terminal()
        assert BuildStatus.FAILED.is_terminal()

    def test_job_duration_and_dict(self):
        start = datetime(2024, 1, 1, 12, 0, 0)
        job = BuildJob(job_id="j1", input_file=Path("in.txt"), output_dir=Path("out"))
        assert job.duration == 0.0

        job.started_at = start
        job.completed_at = start + timedelta(seconds=2)
        job.pages_written.append(Path("out/index.html"))

        data = job.to_dict()
        assert data["duration"] == 2.0
        assert data["status"] == "pending"
        assert data["pages_written"] == [str(Path("out/index.html"))]
        assert job.page_count == 1
