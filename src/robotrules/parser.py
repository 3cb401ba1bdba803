"""robots.txt parsing pipeline.

Raw text flows through four stages, each consuming the full output of the
previous one:

1. ``normalize_lines`` drops blank lines and full-line comments.
2. ``classify_line`` splits a line into key and value and tags its kind.
3. ``segment_groups`` cuts the directive stream at every User-agent line,
   routing Sitemap and unknown directives to top-level lists.
4. ``extract_rulesets`` turns each group into a RuleSet keyed by its title.

``parse_robots_txt`` runs the whole pipeline and returns a fresh
``ParseResult``; nothing is kept between calls.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from robotrules.exceptions import InvalidInputError
from robotrules.models import ParseResult, RuleSet

LOGGER = logging.getLogger(__name__)


class DirectiveKind(Enum):
    """Category of a robots.txt line."""

    RULESET = "ruleset-marker"
    ALLOW = "allow"
    DISALLOW = "disallow"
    DELAY = "delay"
    SITEMAP = "sitemap"
    UNKNOWN = "unknown"


# Lowercased key token -> kind; anything else is UNKNOWN
DIRECTIVE_KINDS: dict[str, DirectiveKind] = {
    "user-agent": DirectiveKind.RULESET,
    "allow": DirectiveKind.ALLOW,
    "disallow": DirectiveKind.DISALLOW,
    "crawl-delay": DirectiveKind.DELAY,
    "sitemap": DirectiveKind.SITEMAP,
}


@dataclass(frozen=True)
class Directive:
    """
    One classified robots.txt line.

    Attributes:
        kind: Directive category.
        value: Trimmed text after the first colon (empty if there was none).
        key: Key token as written in the document.
    """

    kind: DirectiveKind
    value: str
    key: str = ""


@dataclass
class RuleGroup:
    """Directives following one User-agent line, up to the next one."""

    title: str
    directives: list[Directive] = field(default_factory=list)


@dataclass
class Segments:
    """Output of the segmentation pass."""

    groups: list[RuleGroup] = field(default_factory=list)
    sitemaps: list[str] = field(default_factory=list)
    unknown: list[str] = field(default_factory=list)


def normalize_lines(content: str) -> list[str]:
    """
    Split raw text into trimmed content lines.

    Blank lines and lines starting with ``#`` are removed. A ``#`` later in
    a line is kept as part of the line.

    Args:
        content: Raw robots.txt text.

    Returns:
        Non-empty, non-comment lines in document order.
    """
    lines: list[str] = []
    for raw_line in content.split("\n"):
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        lines.append(line)
    return lines


def classify_line(line: str) -> Directive:
    """
    Classify one normalised line.

    The line is split on its first colon only, so colons inside the value
    (ports, URL schemes) survive. A line without any colon becomes an
    UNKNOWN directive with an empty value.

    Args:
        line: A line produced by ``normalize_lines``.

    Returns:
        The classified directive.
    """
    key, sep, value = line.partition(":")
    key = key.strip()
    kind = DIRECTIVE_KINDS.get(key.lower(), DirectiveKind.UNKNOWN)
    return Directive(kind=kind, value=value.strip() if sep else "", key=key)


def segment_groups(directives: Iterable[Directive]) -> Segments:
    """
    Partition directives into rule groups at each User-agent line.

    Sitemap and unknown directives never belong to a group; they go to the
    top-level lists in the order they are met. Access and delay directives
    that appear before the first User-agent line have no group and are
    dropped. Groups sharing a title are all emitted, in source order.

    Args:
        directives: Classified directives in document order.

    Returns:
        Groups plus the collected sitemap and unknown values.
    """
    segments = Segments()
    current: RuleGroup | None = None
    orphaned = 0

    for directive in directives:
        if directive.kind is DirectiveKind.SITEMAP:
            segments.sitemaps.append(directive.value)
        elif directive.kind is DirectiveKind.UNKNOWN:
            segments.unknown.append(directive.value)
        elif directive.kind is DirectiveKind.RULESET:
            current = RuleGroup(title=directive.value)
            segments.groups.append(current)
        elif current is None:
            orphaned += 1
        else:
            current.directives.append(directive)

    if orphaned:
        LOGGER.debug("Dropped %d directive(s) preceding the first User-agent line", orphaned)

    return segments


def extract_rulesets(groups: Iterable[RuleGroup]) -> dict[str, RuleSet]:
    """
    Build a RuleSet for every group, keyed by group title.

    Within a group the last Crawl-delay wins. Across groups, a later group
    with the same title replaces the earlier RuleSet entirely.

    Args:
        groups: Rule groups in source order.

    Returns:
        Mapping of user-agent title to its rules.
    """
    rulesets: dict[str, RuleSet] = {}

    for group in groups:
        allow: list[str] = []
        disallow: list[str] = []
        delay: str | None = None

        for directive in group.directives:
            if directive.kind is DirectiveKind.ALLOW:
                allow.append(directive.value)
            elif directive.kind is DirectiveKind.DISALLOW:
                disallow.append(directive.value)
            elif directive.kind is DirectiveKind.DELAY:
                delay = directive.value

        if group.title in rulesets:
            LOGGER.debug("Replacing earlier rules for user-agent %r", group.title)
        rulesets[group.title] = RuleSet(allow=tuple(allow), disallow=tuple(disallow), delay=delay)

    return rulesets


def parse_robots_txt(content: Any) -> ParseResult:
    """
    Parse robots.txt content.

    Args:
        content: Raw robots.txt text with ``\\n`` line separators.

    Returns:
        ParseResult with rulesets, sitemaps and unknown directive values.

    Raises:
        InvalidInputError: If content is not a string.
    """
    if not isinstance(content, str):
        raise InvalidInputError(
            f"robots.txt content must be a string, got {type(content).__name__}",
            field="content",
            context={"type": type(content).__name__},
        )

    lines = normalize_lines(content)
    directives = [classify_line(line) for line in lines]
    segments = segment_groups(directives)
    rulesets = extract_rulesets(segments.groups)

    LOGGER.debug(
        "Parsed robots.txt: %d line(s), %d group(s), %d sitemap(s), %d unknown",
        len(lines),
        len(segments.groups),
        len(segments.sitemaps),
        len(segments.unknown),
    )

    return ParseResult(
        rulesets=rulesets,
        sitemaps=tuple(segments.sitemaps),
        unknown=tuple(segments.unknown),
    )
