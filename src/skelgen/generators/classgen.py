"""Class skeletons for an existing test case."""

from __future__ import annotations

from skelgen.config import get_source_extension
from skelgen.generators.base import custom_region_line, namespace_lines, sibling_source_file
from skelgen.generators.testcase import TEST_CLASS_SUFFIX
from skelgen.writer import SkeletonWriter


class ClassGenerator:
    """Generates an empty class for the type a test case exercises."""

    def generate(self, writer: SkeletonWriter) -> str:
        parts = ["<?php"]
        parts.extend(namespace_lines(writer.out_name))
        parts.extend(
            [
                "/**",
                f" * Generated from test case {writer.in_name.fully_qualified_name}.",
                " */",
                f"class {writer.out_name.short_name}",
                "{",
                custom_region_line(),
                "}",
                "",
            ]
        )
        return "\n".join(parts)


def create_class_writer(
    in_class_name: str,
    in_source_file: str = "",
    out_class_name: str = "",
    out_source_file: str = "",
    *,
    extension: str | None = None,
) -> SkeletonWriter:
    """Build a writer for the class tested by ``in_class_name``.

    The class name defaults to the test case name without its ``Test``
    suffix and its file to a sibling of the test case file.
    """
    if extension is None:
        extension = get_source_extension()
    if not out_class_name:
        out_class_name = in_class_name.removesuffix(TEST_CLASS_SUFFIX)
    if not out_source_file:
        out_source_file = sibling_source_file(in_source_file, out_class_name, extension)

    return SkeletonWriter(
        ClassGenerator(),
        in_class_name,
        in_source_file,
        out_class_name,
        out_source_file,
        extension=extension,
    )
