"""Data models for robotrules."""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator


class RuleSet(BaseModel):
    """Rules declared for one user-agent title.

    ``allow`` and ``disallow`` keep source order. ``delay`` holds the last
    Crawl-delay value of the group as written (not converted to a number).
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    allow: tuple[str, ...] = ()
    disallow: tuple[str, ...] = ()
    delay: str | None = None


class ParseResult(BaseModel):
    """Complete output of one robots.txt parse.

    Usage:
        result = parse_robots_txt(text)
        result.rulesets["*"].disallow   # ("/admin",)
        result.sitemaps                 # ("https://example.com/sitemap.xml",)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Title -> rules, read-only; a later group with the same title replaces the earlier one
    rulesets: Mapping[str, RuleSet] = Field(default_factory=lambda: MappingProxyType({}))
    sitemaps: tuple[str, ...] = ()
    # Values of directives with an unrecognised key
    unknown: tuple[str, ...] = ()

    @field_validator("rulesets", mode="after")
    @classmethod
    def freeze_rulesets(cls, v: Mapping[str, RuleSet]) -> Mapping[str, RuleSet]:
        """Wrap the mapping in a read-only proxy over a private copy."""
        return MappingProxyType(dict(v))

    @field_serializer("rulesets")
    def serialize_rulesets(self, rulesets: Mapping[str, RuleSet]) -> dict[str, RuleSet]:
        """Serialise the proxy as a plain dict."""
        return dict(rulesets)

    @property
    def agents(self) -> list[str]:
        """User-agent titles in first-declared order."""
        return list(self.rulesets)

    @property
    def is_empty(self) -> bool:
        """True when the document produced no rules, sitemaps or unknown lines."""
        return not (self.rulesets or self.sitemaps or self.unknown)
