"""
Plain-text glossary parser.

Source format: a term line, one or more definition lines, then a blank line,
repeated. Definition lines are joined with each line prefixed by a single
space, so stored definitions start with a space.
"""
from pathlib import Path
from typing import Dict, Iterable, Optional
import logging

from ..core.exceptions import DuplicateTermError, GlossaryReadError, wrap_error
from ..core.interfaces import IGlossaryParser
from ..core.models import DuplicateTermPolicy, Glossary


logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = ('.txt', '')


class GlossaryTextParser(IGlossaryParser):
    """Parser for blank-line separated term/definition text."""

    def __init__(
        self,
        duplicate_policy: DuplicateTermPolicy = DuplicateTermPolicy.LAST_WINS,
        encoding: str = "utf-8"
    ):
        """
        Initialize parser.

        Args:
            duplicate_policy: Handling of terms defined more than once
            encoding: Encoding used by parse_file
        """
        self.duplicate_policy = DuplicateTermPolicy(duplicate_policy)
        self.encoding = encoding

    def can_parse(self, file_path: Path) -> bool:
        return file_path.suffix.lower() in SUPPORTED_SUFFIXES

    def parse(self, lines: Iterable[str]) -> Glossary:
        """
        Group lines into (term, definition) records.

        A non-blank line outside a record starts a record and is the term.
        Following non-blank lines extend the definition until a blank line or
        the end of input. Blank lines outside a record are skipped. Only the
        line terminator is stripped, so a whitespace-only line is not blank.

        Args:
            lines: Source lines, with or without trailing newlines

        Returns:
            Glossary with terms in alphabetical order

        Raises:
            DuplicateTermError: If a term repeats and the policy is REJECT
        """
        definitions: Dict[str, str] = {}
        term: Optional[str] = None
        term_line = 0
        definition = ""

        for line_number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")

            if term is None:
                if line:
                    term, term_line, definition = line, line_number, ""
            elif line:
                definition += " " + line
            else:
                self._add_record(definitions, term, definition, term_line)
                term = None

        if term is not None:
            self._add_record(definitions, term, definition, term_line)

        logger.info(f"Parsed {len(definitions)} glossary terms")
        return Glossary.from_mapping(definitions)

    def parse_file(self, file_path: Path) -> Glossary:
        """
        Read and parse a glossary source file.

        Raises:
            GlossaryReadError: If the file is missing or unreadable
        """
        file_path = Path(file_path)
        if not file_path.is_file():
            raise GlossaryReadError("Glossary file not found", file_path=str(file_path))

        logger.debug(f"Reading glossary from {file_path}")
        try:
            with open(file_path, 'r', encoding=self.encoding) as f:
                return self.parse(f)
        except (OSError, UnicodeDecodeError) as e:
            raise wrap_error(
                e, GlossaryReadError, "Cannot read glossary", file_path=str(file_path)
            )

    def get_parser_info(self):
        return {
            **super().get_parser_info(),
            'duplicate_policy': self.duplicate_policy.value,
            'encoding': self.encoding,
        }

    def _add_record(
        self,
        definitions: Dict[str, str],
        term: str,
        definition: str,
        line_number: int
    ) -> None:
        if term in definitions:
            if self.duplicate_policy is DuplicateTermPolicy.REJECT:
                raise DuplicateTermError(
                    f"Term '{term}' is defined more than once",
                    term=term,
                    line_number=line_number
                )
            logger.warning(
                f"Duplicate term '{term}' at line {line_number}; "
                f"later definition replaces the earlier one"
            )
        definitions[term] = definition
