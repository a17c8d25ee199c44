"""Test case skeletons for an existing class."""

from __future__ import annotations

from skelgen.config import get_source_extension
from skelgen.generators.base import (
    class_reference,
    custom_region_line,
    namespace_lines,
    sibling_source_file,
)
from skelgen.writer import SkeletonWriter

TEST_CLASS_SUFFIX = "Test"
DEFAULT_BASE_CLASS = "\\PHPUnit_Framework_TestCase"


class TestCaseGenerator:
    """Generates a PHPUnit test case with fixture methods.

    Args:
        base_class: Class the generated test case extends.
    """

    # Not a pytest test class
    __test__ = False

    def __init__(self, base_class: str = DEFAULT_BASE_CLASS) -> None:
        self.base_class = base_class

    def generate(self, writer: SkeletonWriter) -> str:
        subject = writer.in_name
        subject_ref = class_reference(subject)

        parts = ["<?php"]
        parts.extend(namespace_lines(writer.out_name))
        if writer.in_path:
            parts.extend([f"require_once '{writer.in_path}';", ""])
        parts.extend(
            [
                "/**",
                f" * Test class for {subject.fully_qualified_name}.",
                " */",
                f"class {writer.out_name.short_name} extends {self.base_class}",
                "{",
                "    /**",
                f"     * @var {subject_ref}",
                "     */",
                "    protected $object;",
                "",
                "    /**",
                "     * Sets up the fixture, for example, opens a network connection.",
                "     * This method is called before a test is executed.",
                "     */",
                "    protected function setUp()",
                "    {",
                f"        $this->object = new {subject_ref};",
                "    }",
                "",
                "    /**",
                "     * Tears down the fixture, for example, closes a network connection.",
                "     * This method is called after a test is executed.",
                "     */",
                "    protected function tearDown()",
                "    {",
                "    }",
                "",
                custom_region_line(),
                "}",
                "",
            ]
        )
        return "\n".join(parts)


def create_test_writer(
    in_class_name: str,
    in_source_file: str = "",
    out_class_name: str = "",
    out_source_file: str = "",
    *,
    extension: str | None = None,
    generator: TestCaseGenerator | None = None,
) -> SkeletonWriter:
    """Build a writer for the test case of ``in_class_name``.

    The test class defaults to ``<class>Test`` and its file to a sibling of
    the class file named after the test class.
    """
    if extension is None:
        extension = get_source_extension()
    if not out_class_name:
        out_class_name = in_class_name + TEST_CLASS_SUFFIX
    if not out_source_file:
        out_source_file = sibling_source_file(in_source_file, out_class_name, extension)

    return SkeletonWriter(
        generator or TestCaseGenerator(),
        in_class_name,
        in_source_file,
        out_class_name,
        out_source_file,
        extension=extension,
    )
