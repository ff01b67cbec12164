"""Glossary Builder - turn a plain-text glossary into cross-linked HTML pages."""
__version__ = "1.0.0"
__author__ = "Glossary Builder Team"

from glossary_builder.core.models import Glossary, SitePage, BuildJob, BuildStatus
from glossary_builder.core.pipeline import GlossaryPipeline

__all__ = [
    "GlossaryPipeline",
    "Glossary",
    "SitePage",
    "BuildJob",
    "BuildStatus",
]
