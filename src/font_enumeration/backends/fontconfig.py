"""fontconfig backend.

Lists fonts with ``fc-list`` and reports fontconfig's native FC_SLANT,
FC_WEIGHT and FC_WIDTH integers.
"""

import shutil
import subprocess
from pathlib import Path

import structlog

from font_enumeration.core.converters import FC_SLANT_ROMAN, FC_WEIGHT_REGULAR, FC_WIDTH_NORMAL
from font_enumeration.domain.font import Platform, RawFontDescriptor
from font_enumeration.exceptions import SystemCollectionUnavailable

# Tab separated, one pattern per line; fontconfig expands the escapes
FC_LIST_FORMAT = (
    "%{family[0]}\\t%{fullname[0]}\\t%{file}\\t%{slant}\\t%{weight}\\t%{width}\\n"
)
FIELD_COUNT = 6


def _parse_int(value: str, default: int) -> int:
    """Parse an fc-list integer, falling back to the fontconfig default.

    Missing values and ranges (variable fonts report e.g. "[0 215]") take
    the default, as FcPatternGetInteger would fail on them.
    """
    value = value.strip()
    if not value:
        return default
    try:
        return int(float(value))
    except ValueError:
        return default


def parse_fc_list_output(output: str) -> list[RawFontDescriptor]:
    """Parse ``fc-list`` output produced with FC_LIST_FORMAT.

    Patterns without a family or file are skipped.

    Args:
        output: Raw fc-list stdout

    Returns:
        Descriptors in fc-list order
    """
    descriptors = []
    for line in output.splitlines():
        if not line.strip():
            continue
        fields = line.split("\t")
        if len(fields) < FIELD_COUNT:
            fields += [""] * (FIELD_COUNT - len(fields))
        family, fullname, file, slant, weight, width = fields[:FIELD_COUNT]

        if not family or not file:
            continue

        descriptors.append(
            RawFontDescriptor(
                family_name=family,
                font_name=fullname,
                path=Path(file),
                platform=Platform.FONTCONFIG,
                slant=_parse_int(slant, FC_SLANT_ROMAN),
                weight=_parse_int(weight, FC_WEIGHT_REGULAR),
                width=_parse_int(width, FC_WIDTH_NORMAL),
            )
        )
    return descriptors


class FontconfigBackend:
    """Enumerates fonts through fontconfig's ``fc-list``."""

    name = Platform.FONTCONFIG.value

    def __init__(
        self,
        command: str = "fc-list",
        timeout_seconds: float = 30.0,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._command = command
        self._timeout = timeout_seconds
        self._logger = logger if logger is not None else structlog.get_logger(__name__)

    def __call__(self) -> list[RawFontDescriptor]:
        """List installed fonts.

        Raises:
            SystemCollectionUnavailable: If fc-list is missing or fails
        """
        fc_list_path = shutil.which(self._command)
        if not fc_list_path:
            raise SystemCollectionUnavailable(self.name, f"'{self._command}' not found in PATH")

        try:
            result = subprocess.run(
                [fc_list_path, "--format", FC_LIST_FORMAT],
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise SystemCollectionUnavailable(
                self.name, f"'{self._command}' timed out after {self._timeout}s"
            ) from e
        except OSError as e:
            raise SystemCollectionUnavailable(self.name, str(e)) from e

        if result.returncode != 0:
            raise SystemCollectionUnavailable(
                self.name,
                f"'{self._command}' exited with {result.returncode}: {result.stderr.strip()}",
            )

        descriptors = parse_fc_list_output(result.stdout)
        self._logger.debug("fc-list parsed", command=fc_list_path, fonts=len(descriptors))
        return descriptors
