"""Placeholder substitution for license templates.

Templates use ``{{name}}`` placeholders. Texts copied verbatim from upstream
license publishers keep their own markers (``[yyyy]``, ``<name of author>``,
...), which are mapped onto the same ``year`` and ``author`` fields.
"""
from __future__ import annotations

import datetime as _dt
import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional, Set, Union

from .catalog import LicenseTemplate
from .errors import MissingAuthor, UnresolvedPlaceholder
from .gitconfig import guess_author

logger = logging.getLogger(__name__)

Context = Dict[str, str]

LEGACY_TOKENS: Dict[str, str] = {
    "[year]": "year",
    "[yyyy]": "year",
    "<year>": "year",
    "[fullname]": "author",
    "[name of copyright owner]": "author",
    "<copyright holders>": "author",
    "<name of author>": "author",
}

PLACEHOLDER_PATTERN = re.compile(
    r"(?P<canonical>\{\{\s*(?P<name>[A-Za-z_][\w-]*)\s*\}\})|(?P<legacy>"
    + "|".join(re.escape(token) for token in sorted(LEGACY_TOKENS, key=len, reverse=True))
    + ")"
)


@dataclass(frozen=True)
class SubstitutionContext:
    author: str
    year: str

    def as_mapping(self) -> Context:
        return {"author": self.author, "year": self.year}


def ensure_value(text: Optional[str]) -> str:
    return text.strip() if text else ""


def default_year(today: Optional[_dt.date] = None) -> str:
    return str((today or _dt.date.today()).year)


def build_context(
    author: Optional[str] = None,
    year: Optional[str] = None,
    *,
    today: Optional[_dt.date] = None,
    author_lookup: Optional[Callable[[], str]] = None,
) -> SubstitutionContext:
    """Fill in whatever the caller left out.

    The year falls back to the calendar year of ``today``; the author falls
    back to ``author_lookup`` (git config, then the environment). An author
    that cannot be found at all raises :class:`MissingAuthor`.
    """
    resolved_year = ensure_value(year) or default_year(today)
    resolved_author = ensure_value(author)
    if not resolved_author:
        lookup = author_lookup or guess_author
        resolved_author = ensure_value(lookup())
    if not resolved_author:
        raise MissingAuthor()
    logger.debug("Substitution context: author=%r year=%r", resolved_author, resolved_year)
    return SubstitutionContext(author=resolved_author, year=resolved_year)


def _field_for(match: "re.Match[str]") -> str:
    name = match.group("name")
    if name is not None:
        return name
    return LEGACY_TOKENS[match.group("legacy")]


def find_placeholders(text: str) -> Set[str]:
    return {_field_for(match) for match in PLACEHOLDER_PATTERN.finditer(text)}


def _values_from(context: Union[SubstitutionContext, Mapping[str, str]]) -> Context:
    raw = context.as_mapping() if isinstance(context, SubstitutionContext) else dict(context)
    values = {key: ensure_value(value) for key, value in raw.items() if ensure_value(value)}
    values.setdefault("year", default_year())
    return values


def render(
    template: Union[LicenseTemplate, str],
    context: Union[SubstitutionContext, Mapping[str, str]],
    *,
    strict: bool = False,
) -> str:
    """Substitute placeholders in a single pass and return the license text.

    Tokens without a value are left verbatim unless ``strict`` is set, in
    which case :class:`UnresolvedPlaceholder` lists them. Rendering the
    output again is a no-op unless a substituted value itself contains a
    placeholder token.
    """
    if isinstance(template, LicenseTemplate):
        text = template.body
        if template.preamble:
            text = f"{template.preamble.strip()}\n\n{text.lstrip()}"
    else:
        text = template
    values = _values_from(context)
    unresolved: Set[str] = set()

    def substitute(match: "re.Match[str]") -> str:
        field = _field_for(match)
        if field in values:
            return values[field]
        unresolved.add(field)
        return match.group(0)

    text = PLACEHOLDER_PATTERN.sub(substitute, text)
    if unresolved:
        if strict:
            raise UnresolvedPlaceholder(unresolved)
        logger.debug("Leaving placeholders untouched: %s", ", ".join(sorted(unresolved)))
    if not text.endswith("\n"):
        text += "\n"
    return text
