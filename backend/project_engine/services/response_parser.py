"""Parser for the delimiter-formatted website generation reply.

Expected shape:

    [FILES]FILENAME: index.html CODE: <html>...</html>FILENAME: style.css CODE: ...[TALK]summary[END]

The format has no escaping. Generated content that itself contains
``FILENAME: ``, ``CODE: ``, ``[TALK]`` or ``[END]`` will be mis-segmented.
"""

from dataclasses import dataclass, field

from project_engine.models import ENTRY_POINT, FileSet

FILES_MARKER = "[FILES]"
TALK_MARKER = "[TALK]"
END_MARKER = "[END]"
FILENAME_MARKER = "FILENAME: "
CODE_MARKER = "CODE: "

DEFAULT_SUMMARY = "Update applied."


@dataclass
class ParsedResponse:
    """Files and summary extracted from a generation reply."""
    files: FileSet = field(default_factory=dict)
    summary: str = DEFAULT_SUMMARY

    @property
    def is_valid(self) -> bool:
        """A reply is usable only if it produced the entry point file."""
        return ENTRY_POINT in self.files


class ResponseParser:
    """Parse generation replies into a file map and a summary."""

    def parse(self, raw: str) -> ParsedResponse:
        """Parse raw reply text. Malformed file blocks are skipped."""
        if not raw:
            return ParsedResponse()

        file_section = self._between(raw, FILES_MARKER, TALK_MARKER)
        summary = self._between(raw, TALK_MARKER, END_MARKER).strip()

        files: FileSet = {}
        for block in file_section.split(FILENAME_MARKER):
            if not block:
                continue
            parts = block.split(CODE_MARKER)
            if len(parts) != 2:
                continue
            files[parts[0].strip()] = parts[1].strip()

        return ParsedResponse(files=files, summary=summary or DEFAULT_SUMMARY)

    def _between(self, text: str, start: str, end: str) -> str:
        """Text after the first ``start`` up to the next ``start`` or ``end``."""
        segments = text.split(start)
        if len(segments) < 2:
            return ""
        return segments[1].split(end)[0]


_parser = ResponseParser()


def parse_response(raw: str) -> ParsedResponse:
    """Parse a generation reply with the shared parser."""
    return _parser.parse(raw)
