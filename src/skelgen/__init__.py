"""skelgen: skeleton generation that survives regeneration.

This package provides:
- Qualified name parsing and path derivation
- A writer that keeps custom code between regenerations
- Test case and class skeleton generators
"""

__version__ = "0.1.0"

from skelgen.generators import (
    ClassGenerator,
    Generator,
    TestCaseGenerator,
    create_class_writer,
    create_test_writer,
)
from skelgen.logging import get_logger
from skelgen.merge import END_MARKER, SAVED_PLACEHOLDER, START_MARKER
from skelgen.names import QualifiedName, derive_path, parse_qualified_name
from skelgen.writer import SkeletonWriter

__all__ = [
    "END_MARKER",
    "SAVED_PLACEHOLDER",
    "START_MARKER",
    "ClassGenerator",
    "Generator",
    "QualifiedName",
    "SkeletonWriter",
    "TestCaseGenerator",
    "create_class_writer",
    "create_test_writer",
    "derive_path",
    "get_logger",
    "parse_qualified_name",
]
