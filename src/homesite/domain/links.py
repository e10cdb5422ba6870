"""External links: the ``links`` frontmatter field.

Frontmatter format::

    links:
      GitHub: https://github.com/user/repo
      Blog post: https://example.com/post

The ``GitHub`` key (exact, case-sensitive) gets its own link type so
templates can render it differently. Every other key becomes an
:class:`OtherLink` with the key as its title.

NOTE: when adding a link type, add its key to :data:`_LINK_KINDS` since
decoding falls through to ``other`` for unknown keys.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date
from functools import total_ordering
from typing import Annotated, Any, ClassVar, Literal

from pydantic import AfterValidator, BaseModel, BeforeValidator, Field, TypeAdapter

GITHUB_KEY = "GitHub"

# Source key -> link kind for keys with dedicated handling.
_LINK_KINDS: dict[str, str] = {GITHUB_KEY: "github"}


@total_ordering
class _LinkBase(BaseModel):
    """Shared ordering for link variants: variant rank, then field values."""

    model_config = {"frozen": True}

    _rank: ClassVar[int] = 0

    def sort_key(self) -> tuple[int, tuple[str, ...]]:
        values = tuple(str(v) for k, v in self if k != "kind")
        return self._rank, values

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, _LinkBase):
            return NotImplemented
        return self.sort_key() < other.sort_key()


class GitHubLink(_LinkBase):
    """A link to a GitHub repository."""

    _rank: ClassVar[int] = 0

    kind: Literal["github"] = "github"
    url: str


class OtherLink(_LinkBase):
    """A link to any other website, shown with *title*."""

    _rank: ClassVar[int] = 1

    kind: Literal["other"] = "other"
    title: str
    url: str


Link = Annotated[GitHubLink | OtherLink, Field(discriminator="kind")]


def _scalar_text(value: Any) -> Any:
    # YAML reads `2024` or `1.5` as numbers; titles and urls keep their text.
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, date):
        return value.isoformat()
    return value


def _link_payloads(value: Any) -> Any:
    """Turn a ``title -> url`` mapping into link payloads in mapping order.

    Anything that is not a mapping passes through untouched so that an
    already-decoded list of links validates as-is.
    """
    if not isinstance(value, Mapping):
        return value
    payloads: list[dict[str, Any]] = []
    for raw_key, raw_url in value.items():
        key, url = _scalar_text(raw_key), _scalar_text(raw_url)
        if not isinstance(key, str):
            msg = f"link title must be a string, got {type(key).__name__}"
            raise ValueError(msg)
        kind = _LINK_KINDS.get(key, "other")
        if kind == "other":
            payloads.append({"kind": kind, "title": key, "url": url})
        else:
            payloads.append({"kind": kind, "url": url})
    return payloads


def _sorted_links(links: list[GitHubLink | OtherLink]) -> list[GitHubLink | OtherLink]:
    return sorted(links)


# Decoded from a map of String (link title) to String (link URL).
Links = Annotated[
    list[Link],
    BeforeValidator(_link_payloads),
    AfterValidator(_sorted_links),
]

_links_adapter: TypeAdapter[list[GitHubLink | OtherLink]] = TypeAdapter(Links)


def decode_links(
    mapping: Mapping[str, str] | Iterable[tuple[str, str]],
) -> list[GitHubLink | OtherLink]:
    """Decode ``title -> url`` entries into a sorted list of links.

    *mapping* may also be an iterable of ``(title, url)`` pairs, in which
    case repeated titles are kept: every entry produces one link.

    Raises:
        pydantic.ValidationError: If a title or URL is not a YAML scalar
            (string, number or date).
    """
    if isinstance(mapping, Mapping):
        return _links_adapter.validate_python(mapping)
    payloads: list[Any] = []
    for pair in mapping:
        payloads.extend(_link_payloads(dict([pair])))
    return _links_adapter.validate_python(payloads)
