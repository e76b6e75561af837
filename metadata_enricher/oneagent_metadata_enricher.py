"""Reads host metadata that the monitoring agent exposes through an indirection file.

When a process runs under the agent, opening the indirection file yields a
single line naming the real metadata file. That file contains ``key=value``
lines which become dimensions. Outside the agent the indirection file does not
exist, and every helper here degrades to an empty result.
"""

from pathlib import Path
from typing import Iterable, List, Optional, TextIO

from common.models import INDIRECTION_FILE_NAME, Dimension
from common.utils import logger


class MetadataReadError(OSError):
    """Raised when metadata cannot be read from the given source."""


def parse_oneagent_metadata(lines: Iterable[str]) -> List[Dimension]:
    """Turn ``key=value`` lines into dimensions, skipping malformed ones.

    Args:
        lines: Lines as read from the metadata file

    Returns:
        Dimensions in input order
    """
    entries: List[Dimension] = []
    for line in lines:
        logger.debug(f"Parsing metadata line: {line!r}")
        key, sep, value = line.partition("=")
        if not sep:
            logger.warning(f"Could not parse metadata line ({line!r}), no '=' found")
            continue

        if not key or not value:
            logger.warning(
                f"Could not parse metadata line ({line!r}), key or value is empty"
            )
            continue

        entries.append(Dimension(key=key, value=value))
    return entries


def get_metadata_file_name(reader: Optional[TextIO]) -> Optional[str]:
    """Read the target file name from an indirection file.

    Returns:
        The first line, stripped, or None if there is no content

    Raises:
        MetadataReadError: If no reader is given
    """
    if reader is None:
        raise MetadataReadError("passed reader cannot be None")

    line = reader.readline()
    if not line:
        return None
    return line.strip()


def get_oneagent_metadata_file_content(reader: Optional[TextIO]) -> List[str]:
    """Return every line of the metadata file with surrounding whitespace removed.

    Raises:
        MetadataReadError: If no reader is given
    """
    if reader is None:
        raise MetadataReadError("passed reader cannot be None")

    return [line.strip() for line in reader.read().splitlines()]


def get_metadata_file_content_with_redirection(indirection_file_name: str) -> List[str]:
    """Follow the indirection file and return the lines of the metadata file.

    Never raises; any missing or unreadable file results in an empty list.
    """
    try:
        with open(indirection_file_name, encoding="utf-8") as indirection_file:
            metadata_file_name = get_metadata_file_name(indirection_file)
    except FileNotFoundError:
        logger.info(
            f"Indirection file {indirection_file_name} not found, "
            "assuming the process is not running under the agent"
        )
        return []
    except OSError as e:
        logger.warning(f"Error reading indirection file {indirection_file_name}: {e}")
        return []

    if not metadata_file_name:
        logger.info("Metadata file name is empty, no metadata to read")
        return []

    try:
        with open(metadata_file_name, encoding="utf-8") as metadata_file:
            return get_oneagent_metadata_file_content(metadata_file)
    except FileNotFoundError:
        logger.warning(f"Metadata file {metadata_file_name} does not exist")
        return []
    except OSError as e:
        logger.warning(f"Error reading metadata file {metadata_file_name}: {e}")
        return []


def read_metadata_file(path: str) -> List[Dimension]:
    """Parse a ``key=value`` file directly, without indirection."""
    try:
        with open(path, encoding="utf-8") as metadata_file:
            return parse_oneagent_metadata(
                get_oneagent_metadata_file_content(metadata_file)
            )
    except OSError as e:
        logger.warning(f"Error reading metadata file {path}: {e}")
        return []


class OneAgentMetadataEnricher:
    """Provides the agent metadata of the current host as dimensions."""

    def __init__(self, indirection_file_name: str = INDIRECTION_FILE_NAME) -> None:
        self.indirection_file_name = indirection_file_name

    def dimensions(self) -> List[Dimension]:
        lines = get_metadata_file_content_with_redirection(self.indirection_file_name)
        return parse_oneagent_metadata(lines)

    @property
    def available(self) -> bool:
        return Path(self.indirection_file_name).exists()
