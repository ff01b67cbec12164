"""Page formatters and writers."""
from .html_formatter import HtmlPageFormatter
from .site_writer import SiteWriter

__all__ = ["HtmlPageFormatter", "SiteWriter"]
