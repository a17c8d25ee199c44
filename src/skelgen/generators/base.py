"""Generator protocol and helpers shared by the skeleton kinds."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

from skelgen.merge import END_MARKER, SAVED_PLACEHOLDER, START_MARKER
from skelgen.names import NAMESPACE_SEPARATOR, QualifiedName, parse_qualified_name

if TYPE_CHECKING:
    from skelgen.writer import SkeletonWriter


class Generator(Protocol):
    """Produces skeleton text from a writer's names and paths.

    Implementations must not do I/O and should place the ``{saved}``
    placeholder once, between the custom region markers.
    """

    def generate(self, writer: SkeletonWriter) -> str: ...


def custom_region_line(indent: str = "    ") -> str:
    """The marker line that receives the saved custom region."""
    return f"{indent}{START_MARKER}{SAVED_PLACEHOLDER}{END_MARKER}"


def namespace_lines(name: QualifiedName) -> list[str]:
    """PHP namespace declaration for ``name``, if it has one."""
    namespace = name.namespace.lstrip(NAMESPACE_SEPARATOR)
    if not namespace:
        return []
    return [f"namespace {namespace};", ""]


def class_reference(name: QualifiedName) -> str:
    """Reference to ``name`` usable from inside any namespace."""
    if not name.namespace:
        return name.fully_qualified_name
    return NAMESPACE_SEPARATOR + name.fully_qualified_name.lstrip(NAMESPACE_SEPARATOR)


def sibling_source_file(source_file: str, class_name: str, extension: str) -> str:
    """Path next to ``source_file`` named after the short form of ``class_name``."""
    short_name = parse_qualified_name(class_name).short_name
    return str(Path(source_file).parent / f"{short_name}{extension}")
