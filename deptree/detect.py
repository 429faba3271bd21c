"""Manifest dialect detection."""

import re

PROJECT_JSON = "project-json"
PROJECT_ASSETS_JSON = "project-assets-json"
PACKAGES_CONFIG = "packages-config"
PROJECT_FILE = "project-file"
UNKNOWN = "unknown"

DIALECTS = (PROJECT_JSON, PROJECT_ASSETS_JSON, PACKAGES_CONFIG, PROJECT_FILE)

PROJECT_FILE_SUFFIXES = (".csproj", ".vbproj", ".fsproj", ".props", ".targets")


def identify(content: str, filename: str | None = None) -> str:
    """Detect manifest dialect from content and filename hints.

    Args:
        content: The manifest file content
        filename: Optional filename for additional context

    Returns:
        One of the ``DIALECTS`` or ``"unknown"``
    """
    # Filename-based detection (takes precedence)
    if filename:
        lowered = filename.lower()
        basename = re.split(r"[\\/]", lowered)[-1]
        if basename == "project.assets.json":
            return PROJECT_ASSETS_JSON
        if basename == "project.json":
            return PROJECT_JSON
        if basename == "packages.config":
            return PACKAGES_CONFIG
        if lowered.endswith(PROJECT_FILE_SUFFIXES):
            return PROJECT_FILE

    # Content-based detection
    if re.search(r"<packages[\s>]", content):
        return PACKAGES_CONFIG
    if re.search(r"<Project[\s>]", content):
        return PROJECT_FILE

    json_patterns = [
        (r'"targets"\s*:', PROJECT_ASSETS_JSON),
        (r'"frameworks"\s*:', PROJECT_JSON),
        (r'"dependencies"\s*:', PROJECT_JSON),
    ]
    for pattern, dialect in json_patterns:
        if re.search(pattern, content):
            return dialect

    return UNKNOWN
