"""Skeleton writer: owns the name/path pair and the regenerate-and-merge write.

A writer is built once per generation request. The skeleton text itself
comes from an injected generator; the writer resolves where it goes and
carries the user's custom region over from the previous version of the file.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from skelgen.config import TEST_INFIX, get_source_extension
from skelgen.io import read_file, write_file
from skelgen.logging import get_logger
from skelgen.merge import EMPTY_REGION, extract_custom_region, splice_saved
from skelgen.names import QualifiedName, derive_path, parse_qualified_name

if TYPE_CHECKING:
    from skelgen.generators.base import Generator

_logger = get_logger("writer")


class SkeletonWriter:
    """Input/output names and paths for one skeleton, plus the write protocol.

    Args:
        generator: Produces the skeleton text for this writer.
        in_class_name: Qualified name of the input type.
        in_source_file: Path of the input source; the qualified name inside
            it is replaced with the short name.
        out_class_name: Qualified name of the generated type.
        out_source_file: Path of the generated source, treated the same way.
        extension: Source extension for target files. Defaults to the
            configured extension.
    """

    def __init__(
        self,
        generator: Generator,
        in_class_name: str = "",
        in_source_file: str = "",
        out_class_name: str = "",
        out_source_file: str = "",
        *,
        extension: str | None = None,
    ) -> None:
        self._generator = generator
        self._in_name = parse_qualified_name(in_class_name)
        self._out_name = parse_qualified_name(out_class_name)
        self._in_path = derive_path(in_source_file, self._in_name)
        self._out_path = derive_path(out_source_file, self._out_name)
        self._extension = extension if extension is not None else get_source_extension()

    @property
    def in_name(self) -> QualifiedName:
        return self._in_name

    @property
    def out_name(self) -> QualifiedName:
        return self._out_name

    @property
    def in_path(self) -> str:
        return self._in_path

    @property
    def out_path(self) -> str:
        return self._out_path

    @property
    def extension(self) -> str:
        return self._extension

    def get_out_class_name(self) -> str:
        return self._out_name.fully_qualified_name

    def get_out_source_file(self) -> str:
        return self._out_path

    def generate(self) -> str:
        """Produce the skeleton text via the injected generator."""
        return self._generator.generate(self)

    def resolve_target(self, target_file: Path | str = "") -> Path:
        """Work out the file a write goes to.

        The extension is stripped once from the end of the path and
        ``.test`` plus the extension appended, so ``Foo.php`` and ``Foo``
        both resolve to ``Foo.test.php``.

        Args:
            target_file: Explicit target; empty means the output source file.

        Returns:
            Normalized target path.
        """
        raw = str(target_file)
        # Path("") renders as "."
        if raw in ("", "."):
            raw = self._out_path
        if self._extension:
            raw = raw.removesuffix(self._extension)
        return Path(raw + TEST_INFIX + self._extension)

    def write(self, target_file: Path | str = "") -> Path:
        """Generate the skeleton and write it, keeping the custom region.

        If the target already exists, the text between its first start
        marker and last end marker replaces the ``{saved}`` placeholder of
        the new output. Otherwise the placeholder becomes a single newline.
        The target is overwritten in full.

        Args:
            target_file: Explicit target; empty means the output source file.

        Returns:
            The path written.

        Raises:
            OSError: If the target cannot be read or written.
        """
        target = self.resolve_target(target_file)
        _logger.debug("Writing skeleton for %s to %s", self.get_out_class_name(), target)

        saved = EMPTY_REGION
        previous = read_file(target)
        if previous is not None:
            region = extract_custom_region(previous)
            if region is None:
                _logger.debug("No custom region found in %s", target)
            else:
                _logger.debug("Keeping %d characters of custom code", len(region))
                saved = region

        generated = self.generate()
        return write_file(target, splice_saved(generated, saved))
