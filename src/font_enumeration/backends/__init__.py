"""Platform font service backends.

Each backend is a callable returning the platform's raw font descriptors,
with missing native attributes already replaced by platform defaults. A
backend raises SystemCollectionUnavailable when its font service cannot
be used.

Key classes:
- FontconfigBackend: Unix-like systems (fc-list)
- CoreTextBackend: macOS (pyobjc CoreText)
- DirectWriteBackend: Windows (font registry + OS/2 tables)
"""

import sys

import structlog

from font_enumeration.backends.core_text import CoreTextBackend
from font_enumeration.backends.direct_write import DirectWriteBackend
from font_enumeration.backends.fontconfig import FontconfigBackend
from font_enumeration.config.settings import BackendConfig, BackendName, get_default_settings
from font_enumeration.core.collection import Backend


def system_backend(
    config: BackendConfig | None = None,
    logger: structlog.stdlib.BoundLogger | None = None,
) -> Backend:
    """Pick the backend for this platform.

    Args:
        config: Backend settings (default: from get_default_settings())
        logger: Logger handed to the backend

    Returns:
        Backend callable
    """
    if config is None:
        config = get_default_settings().backend

    name = config.name
    if name is BackendName.AUTO:
        if sys.platform == "darwin":
            name = BackendName.CORE_TEXT
        elif sys.platform == "win32":
            name = BackendName.DIRECT_WRITE
        else:
            name = BackendName.FONTCONFIG

    if name is BackendName.CORE_TEXT:
        return CoreTextBackend(logger=logger)
    if name is BackendName.DIRECT_WRITE:
        return DirectWriteBackend(logger=logger)
    return FontconfigBackend(
        command=config.fc_list_command,
        timeout_seconds=config.timeout_seconds,
        logger=logger,
    )


__all__ = [
    "CoreTextBackend",
    "DirectWriteBackend",
    "FontconfigBackend",
    "system_backend",
]
