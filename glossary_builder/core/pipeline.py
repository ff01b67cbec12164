"""
Glossary Site Pipeline
======================

Runs the stages in order: parse -> cross-link -> render -> write.
Single-threaded and fail-fast; any stage error aborts the whole run.
"""
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, TYPE_CHECKING
import logging
import uuid

from .exceptions import BuildPipelineError
from .interfaces import (
    IGlossaryParser, IPageFormatter, IPageWriter, IProgressCallback,
    ITermLinker, NullProgressCallback
)
from .linker import TermLinker
from .models import BuildJob, BuildStatus, DuplicateTermPolicy, Glossary, SitePage

if TYPE_CHECKING:
    from ..utils.config_manager import AppConfig, OutputConfig


logger = logging.getLogger(__name__)


class GlossaryPipeline:
    """Builds a cross-linked glossary site from a plain-text source."""

    def __init__(
        self,
        parser: IGlossaryParser,
        linker: ITermLinker,
        formatter: IPageFormatter,
        writer: Optional[IPageWriter] = None,
        output_config: Optional['OutputConfig'] = None
    ):
        """
        Initialize pipeline.

        Args:
            parser: Source parser
            linker: Definition cross-linker
            formatter: Page renderer
            writer: Page sink; build_site creates a SiteWriter when None
            output_config: Settings for the default SiteWriter
        """
        self.parser = parser
        self.linker = linker
        self.formatter = formatter
        self.writer = writer
        self.output_config = output_config

    @classmethod
    def from_config(cls, config: 'AppConfig') -> 'GlossaryPipeline':
        """Create a pipeline from application configuration."""
        from ..formatters.html_formatter import HtmlPageFormatter
        from ..parsers.text_parser import GlossaryTextParser

        parser = GlossaryTextParser(
            duplicate_policy=DuplicateTermPolicy(config.parser.duplicate_policy),
            encoding=config.parser.encoding
        )
        linker = TermLinker(
            separators=frozenset(config.linker.separators),
            link_self=config.linker.link_self,
            extension=config.output.page_extension
        )
        formatter = HtmlPageFormatter(
            site_title=config.output.site_title,
            index_heading=config.output.index_heading,
            index_name=config.output.index_name,
            extension=config.output.page_extension
        )
        return cls(parser, linker, formatter, output_config=config.output)

    # ------------------------------------------------------------------
    # In-memory build
    # ------------------------------------------------------------------

    def link(self, lines: Iterable[str]) -> Glossary:
        """Parse lines and cross-link the definitions."""
        return self.linker.link(self.parser.parse(lines))

    def build(self, lines: Iterable[str]) -> List[SitePage]:
        """Parse, link and render without touching the filesystem."""
        return self.formatter.render_site(self.link(lines))

    # ------------------------------------------------------------------
    # Full build
    # ------------------------------------------------------------------

    def build_site(
        self,
        input_path: Path,
        output_dir: Path,
        progress_callback: Optional[IProgressCallback] = None
    ) -> BuildJob:
        """
        Build the site for a glossary file.

        Args:
            input_path: Glossary source file
            output_dir: Directory receiving index and term pages
            progress_callback: Optional progress observer

        Returns:
            Completed BuildJob

        Raises:
            BuildPipelineError: If any stage fails; the job is marked FAILED
        """
        input_path = Path(input_path)
        output_dir = Path(output_dir)
        callback = progress_callback or NullProgressCallback()
        writer = self.writer or self._default_writer(output_dir)

        job = BuildJob(job_id=str(uuid.uuid4()), input_file=input_path, output_dir=output_dir)
        job.started_at = datetime.now()
        logger.info(f"Building glossary site {input_path} -> {output_dir}")

        try:
            callback.on_start(job)

            self._enter(job, BuildStatus.PARSING, callback)
            glossary = self.parser.parse_file(input_path)
            job.total_terms = len(glossary)

            self._enter(job, BuildStatus.LINKING, callback)
            links_before = self.linker.get_stats().get('links', 0)
            linked = self.linker.link(glossary)
            job.total_links = self.linker.get_stats().get('links', 0) - links_before

            self._enter(job, BuildStatus.RENDERING, callback)
            pages = self.formatter.render_site(linked)

            self._enter(job, BuildStatus.WRITING, callback)
            for path in writer.write(pages):
                job.pages_written.append(path)
                callback.on_page_written(job, path)

            job.status = BuildStatus.COMPLETED
            job.completed_at = datetime.now()
            callback.on_complete(job)

            logger.info(
                f"Complete: {job.total_terms} terms, {job.page_count} pages, "
                f"{job.duration:.2f}s"
            )
            return job

        except Exception as e:
            stage = job.status.value
            job.status = BuildStatus.FAILED
            job.completed_at = datetime.now()
            job.error = str(e)
            callback.on_error(job, e)
            logger.error(f"Build failed during {stage}: {e}")

            raise BuildPipelineError(
                f"Build failed: {e}", stage=stage, error_type=e.__class__.__name__
            ) from e

    def _enter(self, job: BuildJob, status: BuildStatus, callback: IProgressCallback) -> None:
        job.status = status
        logger.debug(f"Job {job.job_id}: {status.value}")
        callback.on_stage(job, status)

    def _default_writer(self, output_dir: Path) -> IPageWriter:
        from ..formatters.site_writer import SiteWriter

        output = self.output_config
        if output is None:
            return SiteWriter(output_dir)
        return SiteWriter(
            output_dir,
            extension=output.page_extension,
            encoding=output.encoding,
            overwrite=output.overwrite
        )
