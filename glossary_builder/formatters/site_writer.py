"""
Writes rendered pages into an output directory.
"""
from pathlib import Path
from typing import List, Sequence
import logging

from ..core.exceptions import OutputError, error_context
from ..core.interfaces import IPageWriter
from ..core.models import PAGE_EXTENSION, SitePage


logger = logging.getLogger(__name__)

_FORBIDDEN_NAMES = frozenset({"", ".", ".."})
_PATH_SEPARATORS = ("/", "\\", "\0")


class SiteWriter(IPageWriter):
    """Writes each page to ``<output_dir>/<name><extension>``."""

    def __init__(
        self,
        output_dir: Path,
        extension: str = PAGE_EXTENSION,
        encoding: str = "utf-8",
        overwrite: bool = True
    ):
        self.output_dir = Path(output_dir)
        self.extension = extension
        self.encoding = encoding
        self.overwrite = overwrite

    def target_path(self, page: SitePage) -> Path:
        """
        Path a page will be written to.

        Raises:
            OutputError: If the page name cannot be used as a file name
        """
        name = page.name
        if name in _FORBIDDEN_NAMES or any(sep in name for sep in _PATH_SEPARATORS):
            raise OutputError(f"Unsafe page name: {name!r}", output_path=str(self.output_dir))
        return self.output_dir / page.file_name(self.extension)

    def write_page(self, page: SitePage) -> Path:
        path = self.target_path(page)

        if not self.overwrite and path.exists():
            raise OutputError("Output file already exists", output_path=str(path))

        with error_context("writing page", OutputError, logger, output_path=str(path)):
            self.output_dir.mkdir(parents=True, exist_ok=True)
            with open(path, 'w', encoding=self.encoding) as f:
                f.write(page.text)

        logger.debug(f"Wrote {path}")
        return path

    def write(self, pages: Sequence[SitePage]) -> List[Path]:
        # Reject unsafe or colliding names before anything is written
        claimed = {}
        for page in pages:
            path = self.target_path(page)
            if path in claimed:
                raise OutputError(
                    f"Pages {claimed[path]!r} and {page.name!r} would both be written "
                    f"to {path.name}",
                    output_path=str(path)
                )
            claimed[path] = page.name

        paths = super().write(pages)
        logger.info(f"Wrote {len(paths)} pages to {self.output_dir}")
        return paths
