"""
Core glossary pipeline: data model, tokenizer, cross-linker and stages.
"""
from .exceptions import (
    GlossaryBuilderError, InvalidArgumentError, TermNotFoundError,
    InvalidGlossaryError, ParserError, GlossaryReadError, DuplicateTermError,
    FormatterError, OutputError, PipelineError, BuildPipelineError,
    ConfigurationError,
)
from .models import (
    WORD_SEPARATORS, INDEX_PAGE_NAME, PAGE_EXTENSION,
    BuildJob, BuildStatus, DuplicateTermPolicy, Glossary, SitePage,
)
from .tokenizer import next_token, tokenize
from .linker import TermLinker, link_definition, make_term_link
from .pipeline import GlossaryPipeline

__all__ = [
    # Exceptions
    "GlossaryBuilderError", "InvalidArgumentError", "TermNotFoundError",
    "InvalidGlossaryError", "ParserError", "GlossaryReadError",
    "DuplicateTermError", "FormatterError", "OutputError", "PipelineError",
    "BuildPipelineError", "ConfigurationError",
    # Models
    "WORD_SEPARATORS", "INDEX_PAGE_NAME", "PAGE_EXTENSION",
    "BuildJob", "BuildStatus", "DuplicateTermPolicy", "Glossary", "SitePage",
    # Stages
    "next_token", "tokenize", "TermLinker", "link_definition", "make_term_link",
    "GlossaryPipeline",
]
