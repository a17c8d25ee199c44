"""Qualified name parsing and path derivation.

A qualified name is a namespace prefix and a short name joined with a
backslash, e.g. ``Vendor\\Package\\Foo``. Any string is accepted.
"""

from __future__ import annotations

from dataclasses import dataclass

NAMESPACE_SEPARATOR = "\\"


@dataclass(frozen=True)
class QualifiedName:
    """A parsed type name."""

    namespace: str
    short_name: str
    fully_qualified_name: str


def _namespace_from_segments(segments: list[str]) -> str:
    if len(segments) > 1:
        return NAMESPACE_SEPARATOR.join(segments[:-1])
    return ""


def parse_qualified_name(raw: str) -> QualifiedName:
    """Split a raw identifier into namespace and short name.

    Args:
        raw: Identifier as given by the caller, possibly empty.

    Returns:
        QualifiedName whose fully_qualified_name is ``raw`` unchanged.
    """
    if NAMESPACE_SEPARATOR not in raw:
        return QualifiedName(namespace="", short_name=raw, fully_qualified_name=raw)

    segments = raw.split(NAMESPACE_SEPARATOR)
    return QualifiedName(
        namespace=_namespace_from_segments(segments),
        short_name=segments[-1],
        fully_qualified_name=raw,
    )


def derive_path(template: str, name: QualifiedName) -> str:
    """Replace the qualified form of ``name`` with its short form in a path.

    Plain string substitution; an empty name leaves the template unchanged.
    """
    if not name.fully_qualified_name:
        return template
    return template.replace(name.fully_qualified_name, name.short_name)
