"""Glossary source parsers."""
from .text_parser import GlossaryTextParser

__all__ = ["GlossaryTextParser"]
