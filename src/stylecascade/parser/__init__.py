from stylecascade.parser.declarations import inline_declarations, parse_declarations
from stylecascade.parser.document import Document
from stylecascade.parser.errors import ConditionError, ParseError
from stylecascade.parser.stylesheet import parse_stylesheet

__all__ = [
    "Document",
    "ConditionError",
    "ParseError",
    "inline_declarations",
    "parse_declarations",
    "parse_stylesheet",
]
