"""Agent metadata parsing and monitoring."""

from common.models import INDIRECTION_FILE_NAME

from .metadata_monitor import MetadataFileMonitor
from .oneagent_metadata_enricher import (
    MetadataReadError,
    OneAgentMetadataEnricher,
    get_metadata_file_content_with_redirection,
    get_metadata_file_name,
    get_oneagent_metadata_file_content,
    parse_oneagent_metadata,
    read_metadata_file,
)

__all__ = [
    "INDIRECTION_FILE_NAME",
    "MetadataFileMonitor",
    "MetadataReadError",
    "OneAgentMetadataEnricher",
    "get_metadata_file_content_with_redirection",
    "get_metadata_file_name",
    "get_oneagent_metadata_file_content",
    "parse_oneagent_metadata",
    "read_metadata_file",
]
