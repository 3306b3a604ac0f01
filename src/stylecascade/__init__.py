"""stylecascade -- resolve the effective CSS declarations for an element."""

__version__ = "0.1.0"

from stylecascade.cascade import (  # noqa: E402
    get_document_style_rules,
    get_element_styles,
    get_pseudo_element_styles,
)
from stylecascade.conditions import Environment  # noqa: E402
from stylecascade.config import EnvironmentConfig  # noqa: E402
from stylecascade.parser import Document, parse_stylesheet  # noqa: E402

__all__ = [
    "__version__",
    "Document",
    "Environment",
    "EnvironmentConfig",
    "get_document_style_rules",
    "get_element_styles",
    "get_pseudo_element_styles",
    "parse_stylesheet",
]
