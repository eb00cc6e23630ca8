"""Enterprise Edition license acceptance check."""

import logging
from pathlib import Path
from typing import Optional

from ..exceptions import LicenseNotAccepted
from .constants import ENTERPRISE_SUFFIX, IMAGE_NAME, LICENSE_ACCEPTANCE_FILE

logger = logging.getLogger(__name__)


def license_line_for(version: str, image_name: str = IMAGE_NAME) -> str:
    """Line the acceptance file must contain for the given version."""
    return f"{image_name}:{version}{ENTERPRISE_SUFFIX}"


def check_license_accepted(
    version: str,
    image_name: str = IMAGE_NAME,
    directory: Optional[Path] = None,
) -> None:
    """Verify that the enterprise license was accepted for a version.

    The acceptance file lives in the current working directory (or in
    ``directory`` when given) and must contain, on some line after
    whitespace trimming, ``<image_name>:<version>-enterprise``.

    Args:
        version: Resolved version, without edition suffix
        image_name: Image name used in the expected line
        directory: Directory to look in instead of the working directory

    Raises:
        LicenseNotAccepted: If the file is missing, unreadable, or lacks the line
    """
    expected_line = license_line_for(version, image_name)
    license_file = (directory or Path.cwd()) / LICENSE_ACCEPTANCE_FILE

    try:
        content = license_file.read_text()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Could not read {license_file}: {e}")
        raise LicenseNotAccepted(LICENSE_ACCEPTANCE_FILE, expected_line) from e

    if not any(line.strip() == expected_line for line in content.splitlines()):
        raise LicenseNotAccepted(LICENSE_ACCEPTANCE_FILE, expected_line)

    logger.debug(f"License accepted for {expected_line}")
