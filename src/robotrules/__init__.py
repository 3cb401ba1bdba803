"""Parse robots.txt documents into structured rule groups."""

from robotrules.exceptions import (
    ConfigurationError,
    InvalidInputError,
    RetrievalError,
    RobotRulesError,
)
from robotrules.models import ParseResult, RuleSet
from robotrules.parser import parse_robots_txt

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "InvalidInputError",
    "ParseResult",
    "RetrievalError",
    "RobotRulesError",
    "RuleSet",
    "__version__",
    "parse_robots_txt",
]
