"""Skeleton generators.

Each generator turns a writer's names and paths into skeleton text for one
kind of artifact:
- Test case skeletons for an existing class
- Class skeletons for an existing test case
"""

from skelgen.generators.base import Generator
from skelgen.generators.classgen import ClassGenerator, create_class_writer
from skelgen.generators.testcase import TestCaseGenerator, create_test_writer

__all__ = [
    "ClassGenerator",
    "Generator",
    "TestCaseGenerator",
    "create_class_writer",
    "create_test_writer",
]
