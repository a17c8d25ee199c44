"""Custom region markers and the splice applied on regeneration.

Generated files carry a region delimited by two comment tokens. Whatever
a user writes between them is read back from the previous file and put in
place of the ``{saved}`` placeholder of the new output. The tokens are an
on-disk format shared with every file generated so far and must not change.
"""

from __future__ import annotations

START_MARKER = "/* custom tests (will be saved when test are regenerated) */"
END_MARKER = "/* end custom tests */"
SAVED_PLACEHOLDER = "{saved}"

# Used when there is no previous file or it has no usable markers
EMPTY_REGION = "\n"


def extract_custom_region(contents: str) -> str | None:
    """Return the text between the first start marker and the last end marker.

    Nested or repeated marker pairs are not matched up: everything between
    the outermost tokens is returned, inner tokens included.

    Args:
        contents: Full text of a previously generated file.

    Returns:
        The custom region, or None if a marker is missing or the end marker
        precedes the start marker.
    """
    start = contents.find(START_MARKER)
    end = contents.rfind(END_MARKER)
    if start == -1 or end == -1:
        return None

    region_start = start + len(START_MARKER)
    if end < region_start:
        return None
    return contents[region_start:end]


def splice_saved(generated: str, saved: str) -> str:
    """Put ``saved`` in place of the placeholder in generated text."""
    return generated.replace(SAVED_PLACEHOLDER, saved)
