"""
Front matter metadata for markdown help pages.

Every command page starts with a YAML header that records where the help
came from. The base keys are derived from the Help Model; callers may pass
their own keys, which take precedence over the derived ones.
"""

from datetime import datetime
from typing import Any, Dict, Iterable, Mapping, Optional

from cmdhelp.schemas import CommandHelp

SCHEMA_VERSION = "2024-05-01"
DATE_FORMAT = "%m/%d/%Y"


def command_help_base_metadata(
    command_help: CommandHelp,
    now: Optional[datetime] = None
) -> Dict[str, Any]:
    """
    Build the default front matter for a command page.

    Args:
        command_help: Help Model of the command
        now: Generation time (default: current local time)

    Returns:
        Ordered metadata mapping
    """
    now = now or datetime.now()
    return {
        "title": command_help.title,
        "Module Name": command_help.module_name,
        "Locale": command_help.locale,
        "PlatyPS schema version": SCHEMA_VERSION,
        "HelpUri": command_help.online_version_url or "",
        "ms.date": now.strftime(DATE_FORMAT),
        "external help file": command_help.external_help_file,
    }


def merge_metadata(
    user_metadata: Optional[Mapping[str, Any]],
    base_metadata: Mapping[str, Any]
) -> Dict[str, Any]:
    """Keep every user-supplied key and fill the rest from the base metadata."""
    merged = dict(user_metadata or {})
    for key, value in base_metadata.items():
        if key not in merged:
            merged[key] = value
    return merged


def module_page_metadata(
    module_name: str,
    locale: str = "en-US",
    help_version: Optional[str] = None,
    help_info_uri: Optional[str] = None,
    module_guid: Optional[str] = None
) -> Dict[str, Any]:
    """Front matter for the module index page."""
    return {
        "Module Name": module_name,
        "Module Guid": module_guid or "{{ Update Module Guid }}",
        "Download Help Link": help_info_uri or "{{ Update Download Link }}",
        "Help Version": help_version or "{{ Please enter version of help manually (X.X.X.X) format }}",
        "Locale": locale,
        "PlatyPS schema version": SCHEMA_VERSION,
    }


def parse_metadata_pairs(pairs: Iterable[str]) -> Dict[str, str]:
    """
    Parse 'key=value' strings given on the command line.

    Raises:
        ValueError: if an item has no '='
    """
    metadata = {}
    for pair in pairs:
        key, separator, value = pair.partition("=")
        if not separator or not key.strip():
            raise ValueError(f"Metadata must be given as key=value, got '{pair}'")
        metadata[key.strip()] = value.strip()
    return metadata
