"""
Abstract interfaces for the glossary site pipeline stages.
"""
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import BuildJob, BuildStatus, Glossary, SitePage


# ============================================================================
# PARSER INTERFACE
# ============================================================================

class IGlossaryParser(ABC):
    """Interface for glossary source parsers."""

    @abstractmethod
    def can_parse(self, file_path: Path) -> bool:
        """Check if file can be parsed."""
        pass

    @abstractmethod
    def parse(self, lines: Iterable[str]) -> 'Glossary':
        """Group source lines into an alphabetically ordered glossary."""
        pass

    @abstractmethod
    def parse_file(self, file_path: Path) -> 'Glossary':
        """Read a glossary source file and parse it."""
        pass

    def get_parser_info(self) -> Dict[str, Any]:
        return {'parser_class': self.__class__.__name__}


# ============================================================================
# LINKER INTERFACE
# ============================================================================

class ITermLinker(ABC):
    """Interface for definition cross-linkers."""

    @abstractmethod
    def link(self, glossary: 'Glossary') -> 'Glossary':
        """Return a glossary whose definitions link to other terms."""
        pass

    def get_stats(self) -> Dict[str, Any]:
        return {}


# ============================================================================
# FORMATTER INTERFACE
# ============================================================================

class IPageFormatter(ABC):
    """Interface for page renderers."""

    @abstractmethod
    def render_index(self, terms: Sequence[str]) -> str:
        """Render the index document listing every term."""
        pass

    @abstractmethod
    def render_term_page(self, term: str, definition: str) -> str:
        """Render the document for one term."""
        pass

    @abstractmethod
    def render_site(self, glossary: 'Glossary') -> List['SitePage']:
        """Render the index followed by every term page."""
        pass

    def get_formatter_info(self) -> Dict[str, Any]:
        return {'formatter_class': self.__class__.__name__}


# ============================================================================
# WRITER INTERFACE
# ============================================================================

class IPageWriter(ABC):
    """Interface for page sinks."""

    @abstractmethod
    def write_page(self, page: 'SitePage') -> Path:
        """Persist one page and return its path."""
        pass

    def write(self, pages: Sequence['SitePage']) -> List[Path]:
        """Persist pages in order and return the written paths."""
        return [self.write_page(page) for page in pages]


# ============================================================================
# PROGRESS CALLBACK INTERFACE
# ============================================================================

class IProgressCallback(ABC):
    """Interface for build progress callbacks."""

    @abstractmethod
    def on_start(self, job: 'BuildJob') -> None:
        """Called when the build starts."""
        pass

    @abstractmethod
    def on_stage(self, job: 'BuildJob', status: 'BuildStatus') -> None:
        """Called when the build enters a new stage."""
        pass

    @abstractmethod
    def on_complete(self, job: 'BuildJob') -> None:
        """Called when the build completes."""
        pass

    @abstractmethod
    def on_error(self, job: 'BuildJob', error: Exception) -> None:
        """Called on error."""
        pass

    def on_page_written(self, job: 'BuildJob', path: Path) -> None:
        """Called after each page is written (optional)."""
        pass


class NullProgressCallback(IProgressCallback):
    """Callback that ignores every event."""

    def on_start(self, job: 'BuildJob') -> None:
        pass

    def on_stage(self, job: 'BuildJob', status: 'BuildStatus') -> None:
        pass

    def on_complete(self, job: 'BuildJob') -> None:
        pass

    def on_error(self, job: 'BuildJob', error: Exception) -> None:
        pass
