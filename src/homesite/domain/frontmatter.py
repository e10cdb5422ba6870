"""Frontmatter extraction and the site's frontmatter schemas.

The frontmatter is the first node inside the document's ``root`` node.
Its position is fixed rather than searched for: a document whose first
block is anything else has no frontmatter.

Schemas use Pydantic with frozen config for immutability. Unknown keys
are ignored unless a schema sets ``extra="forbid"``.
"""

from __future__ import annotations

from datetime import date, datetime
from functools import lru_cache
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, TypeAdapter, ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from homesite.domain.errors import (
    FrontmatterDecodeError,
    InvalidDocumentError,
    MissingFrontmatterError,
)
from homesite.domain.links import Links
from homesite.infrastructure.markdown import build_frontmatter_parser, parse_tree

ROOT_NODE = "root"
FRONTMATTER_NODE = "front_matter"


def _new_yaml() -> YAML:
    """Create a fresh safe YAML loader (ruamel's YAML object is stateful)."""
    return YAML(typ="safe", pure=True)


@lru_cache(maxsize=64)
def _adapter(schema: Any) -> TypeAdapter[Any]:
    return TypeAdapter(schema)


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------


def find_frontmatter(raw_text: str) -> str:
    """Return the raw YAML text of the leading frontmatter block.

    Raises:
        InvalidDocumentError: If the parsed tree has no root node.
        MissingFrontmatterError: If the first node is not frontmatter.
    """
    tree = parse_tree(raw_text, build_frontmatter_parser())
    if tree.type != ROOT_NODE:
        raise InvalidDocumentError(tree.type)
    if not tree.children or tree.children[0].type != FRONTMATTER_NODE:
        raise MissingFrontmatterError
    return tree.children[0].content


def decode_frontmatter[F](yaml_text: str, schema: type[F]) -> F:
    """Decode raw YAML *yaml_text* into *schema*.

    Raises:
        FrontmatterDecodeError: On YAML syntax errors or schema mismatches.
    """
    try:
        data = _new_yaml().load(yaml_text)
        return _adapter(schema).validate_python(data)
    except (YAMLError, ValidationError) as exc:
        raise FrontmatterDecodeError(exc) from exc


def extract_frontmatter[F](raw_text: str, schema: type[F]) -> F:
    """Extract the frontmatter of *raw_text* and decode it into *schema*.

    *schema* is anything Pydantic can validate from a mapping: a model,
    a dataclass, a ``TypedDict``, or a plain ``dict[str, str]``.
    Extraction is all-or-nothing.
    """
    return decode_frontmatter(find_frontmatter(raw_text), schema)


# ---------------------------------------------------------------------------
# Field types
# ---------------------------------------------------------------------------


def _date_to_str(value: Any) -> Any:
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


# YAML turns ``2024-01-31`` into a date; dates are kept as their ISO text
# and compared as strings.
DateString = Annotated[str, BeforeValidator(_date_to_str)]


# ---------------------------------------------------------------------------
# Site schemas
# ---------------------------------------------------------------------------


class ProjectFrontmatter(BaseModel):
    """Frontmatter for files in the projects directory."""

    model_config = {"frozen": True}

    name: str
    description: str
    created_at: DateString
    updated_at: DateString | None = None
    links: Links | None = None


class WishlistFrontmatter(BaseModel):
    """Frontmatter for wishlist posts."""

    model_config = {"frozen": True}

    name: str
    created_at: DateString
    updated_at: DateString | None = None
