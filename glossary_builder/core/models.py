"""
Core Data Models
================

Immutable glossary value object plus the records describing one site build.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterator, List, Mapping, Optional, Tuple

from .exceptions import InvalidGlossaryError, TermNotFoundError


# ============================================================================
# CONSTANTS
# ============================================================================

# Comma, space, horizontal tab, semicolon, period
WORD_SEPARATORS: FrozenSet[str] = frozenset(", \t;.")

INDEX_PAGE_NAME = "index"
PAGE_EXTENSION = ".html"
DEFAULT_SITE_TITLE = "Glossary"


# ============================================================================
# ENUMS
# ============================================================================

class DuplicateTermPolicy(Enum):
    """What the parser does when a term is defined more than once."""
    LAST_WINS = "last_wins"
    REJECT = "reject"


class BuildStatus(Enum):
    PENDING = "pending"
    PARSING = "parsing"
    LINKING = "linking"
    RENDERING = "rendering"
    WRITING = "writing"
    COMPLETED = "completed"
    FAILED = "failed"

    def is_terminal(self) -> bool:
        return self in (self.COMPLETED, self.FAILED)


# ============================================================================
# GLOSSARY
# ============================================================================

@dataclass(frozen=True)
class Glossary:
    """
    Terms in codepoint order paired with a read-only term -> definition mapping.

    The term tuple and the mapping key set must be identical; construction
    fails with InvalidGlossaryError otherwise.
    """
    terms: Tuple[str, ...]
    definitions: Mapping[str, str]

    def __post_init__(self):
        terms = tuple(self.terms)
        definitions = MappingProxyType(dict(self.definitions))

        if len(set(terms)) != len(terms):
            raise InvalidGlossaryError("Term list contains duplicates")
        if set(terms) != set(definitions):
            missing = sorted(set(terms) - set(definitions))
            extra = sorted(set(definitions) - set(terms))
            raise InvalidGlossaryError(
                "Terms and definitions do not match", missing=missing, extra=extra
            )
        if list(terms) != sorted(terms):
            raise InvalidGlossaryError("Terms are not in alphabetical order")

        # Frozen workaround
        object.__setattr__(self, 'terms', terms)
        object.__setattr__(self, 'definitions', definitions)

    @classmethod
    def from_mapping(cls, definitions: Mapping[str, str]) -> 'Glossary':
        """Build a glossary, ordering the terms alphabetically."""
        return cls(terms=tuple(sorted(definitions)), definitions=definitions)

    @classmethod
    def empty(cls) -> 'Glossary':
        return cls(terms=(), definitions={})

    def definition(self, term: str) -> str:
        """
        Look up the definition of a term.

        Raises:
            TermNotFoundError: If the term is not in the glossary
        """
        try:
            return self.definitions[term]
        except KeyError:
            raise TermNotFoundError(f"No definition for term '{term}'", term=term) from None

    def with_definitions(self, definitions: Mapping[str, str]) -> 'Glossary':
        """Return a copy with the same terms and replaced definitions."""
        return Glossary(terms=self.terms, definitions=definitions)

    def items(self) -> Iterator[Tuple[str, str]]:
        """(term, definition) pairs in alphabetical order."""
        for term in self.terms:
            yield term, self.definitions[term]

    def __len__(self) -> int:
        return len(self.terms)

    def __iter__(self) -> Iterator[str]:
        return iter(self.terms)

    def __contains__(self, term: object) -> bool:
        return term in self.definitions


# ============================================================================
# OUTPUT CLASSES
# ============================================================================

@dataclass(frozen=True)
class SitePage:
    """One rendered document; name has no extension."""
    name: str
    text: str

    def file_name(self, extension: str = PAGE_EXTENSION) -> str:
        return f"{self.name}{extension}"


@dataclass
class BuildJob:
    job_id: str
    input_file: Path
    output_dir: Path
    status: BuildStatus = BuildStatus.PENDING
    total_terms: int = 0
    total_links: int = 0
    pages_written: List[Path] = field(default_factory=list)
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
    error: Optional[str] = None

    @property
    def duration(self) -> float:
        if self.started_at and self.completed_at:
            return (self.completed_at - self.started_at).total_seconds()
        elif self.started_at:
            return (datetime.now() - self.started_at).total_seconds()
        return 0.0

    @property
    def page_count(self) -> int:
        return len(self.pages_written)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'job_id': self.job_id,
            'input_file': str(self.input_file),
            'output_dir': str(self.output_dir),
            'status': self.status.value,
            'total_terms': self.total_terms,
            'total_links': self.total_links,
            'pages_written': [str(p) for p in self.pages_written],
            'started_at': self.started_at.isoformat() if self.started_at else None,
            'completed_at': self.completed_at.isoformat() if self.completed_at else None,
            'duration': self.duration,
            'error': self.error,
        }
