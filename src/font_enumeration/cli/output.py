"""Rich console output helpers for the CLI.

Results go to stdout, errors to stderr. Two renderers share one
interface: HumanReadableOutput prints one block per font face and
JsonOutput collects faces and prints a single JSON array on finish().
"""

from collections.abc import Iterable
from typing import Any, Protocol

from fontTools.ttLib import TTFont
from rich.console import Console
from rich.text import Text

from font_enumeration.config import OutputConfig
from font_enumeration.io import (
    extract_features,
    extract_metrics,
    extract_writing_systems,
    face_attributes,
)

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

SYM_ERR = "✗"  # Error

BLOCK_WIDTH = 60
LABEL_WIDTH = 20


class Output(Protocol):
    """Destination for inspected font faces."""

    def push_font(self, source: str, font_index: int, face: TTFont) -> None: ...

    def finish(self) -> None: ...


def _line(label: str, value: object) -> Text:
    # Text keeps paths and names free of markup interpretation
    return Text(f"{label:>{LABEL_WIDTH}}: {value}")


def _continued(items: Iterable[str]) -> str:
    return ("\n" + " " * (LABEL_WIDTH + 2)).join(items)


class HumanReadableOutput:
    """Prints each face as a labelled block."""

    def __init__(self, options: OutputConfig, out: Console | None = None) -> None:
        self._options = options
        self._console = out if out is not None else console
        self.fonts_written = 0

    def push_font(self, source: str, font_index: int, face: TTFont) -> None:
        font_num = self.fonts_written + 1
        header = f"-[ FONT {font_num} ]-"
        self._console.print(Text(header + "-" * max(BLOCK_WIDTH - len(header), 0)))

        self._console.print(_line("Source", source))
        self._console.print(_line("Font index in source", font_index))

        attributes = face_attributes(face)
        self._console.print(_line("Weight", attributes.weight))
        self._console.print(_line("Style", attributes.style))
        self._console.print(_line("Stretch", attributes.stretch))

        if self._options.print_features:
            features = [f"{f.tag}:{f.action}" for f in extract_features(face)]
            self._console.print(_line("Features", _continued(features)))

        if self._options.print_writing_systems:
            systems = [str(s) for s in extract_writing_systems(face)]
            self._console.print(_line("Writing systems", _continued(systems)))

        metrics = extract_metrics(face)
        for label, value in (
            ("Glyph count", metrics.glyph_count),
            ("Units per em", metrics.units_per_em),
            ("Average advance", metrics.average_advance),
            ("Ascent", metrics.ascent),
            ("Descent", metrics.descent),
            ("Line height", metrics.line_height),
            ("Leading", metrics.leading),
            ("Capital height", metrics.cap_height),
            ('"x" height', metrics.x_height),
            ("Stroke thickness", metrics.stroke_size),
            ("Underline offset", metrics.underline_offset),
            ("Strikeout offset", metrics.strikeout_offset),
        ):
            self._console.print(_line(label, value))

        self.fonts_written += 1

    def finish(self) -> None:
        pass


class JsonOutput:
    """Collects faces and prints them as one JSON array."""

    def __init__(self, options: OutputConfig, out: Console | None = None) -> None:
        self._options = options
        self._console = out if out is not None else console
        self.entries: list[dict[str, Any]] = []

    def push_font(self, source: str, font_index: int, face: TTFont) -> None:
        entry: dict[str, Any] = {"source": source, "fontIndex": font_index}
        if self._options.print_features:
            entry["features"] = [
                {"feature": f.tag, "action": f.action} for f in extract_features(face)
            ]
        if self._options.print_writing_systems:
            entry["writingSystems"] = [
                {"script": s.script, "language": s.language}
                for s in extract_writing_systems(face)
            ]
        entry["metrics"] = extract_metrics(face).to_dict()
        self.entries.append(entry)

    def finish(self) -> None:
        self._console.print_json(data=self.entries)


def print_font_table(fonts: Iterable[Any]) -> int:
    """Print collection records one per line.

    Returns:
        Number of records printed
    """
    count = 0
    for font in fonts:
        line = Text(font.family_name, style="bold")
        line.append(f"  {font.font_name}  ")
        line.append(f"{font.style} / {font.weight} / {font.stretch}  ")
        line.append(str(font.path), style="dim")
        console.print(line)
        count += 1
    return count


def print_font_json(fonts: Iterable[Any]) -> int:
    """Print collection records as a JSON array.

    Returns:
        Number of records printed
    """
    entries = [font.to_dict() for font in fonts]
    console.print_json(data=entries)
    return len(entries)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    err_console.print(f"[bold red]{SYM_ERR} Error:[/bold red] ", end="")
    err_console.print(Text(message))
    if details:
        err_console.print(Text(f"  {details}"))
