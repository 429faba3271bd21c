"""MSBuild property lookup and ``$(Name)`` version resolution."""

import re
from typing import Any

from .models import PropsLookup
from .xml_decode import ATTRS_KEY, as_list, text_value

VARS_MATCHER = re.compile(r"^\$\((.*?)\)")


def property_groups(manifest: Any) -> list[dict]:
    """Return the ``Project.PropertyGroup`` blocks that carry properties."""
    project = manifest.get("Project") if isinstance(manifest, dict) else None
    if not isinstance(project, dict):
        return []
    return [group for group in as_list(project.get("PropertyGroup")) if isinstance(group, dict)]


def get_properties_map(manifest: Any) -> PropsLookup:
    """Flatten every property group into a single name -> value table.

    Groups are read in document order and a property declared again in a
    later group replaces the earlier value.
    """
    props: PropsLookup = {}
    for group in property_groups(manifest):
        for key, value in group.items():
            if key == ATTRS_KEY:
                continue
            text = text_value(value)
            if text is not None:
                props[key] = text
    return props


def resolve_version(
    declared: str | None,
    manifest_properties: PropsLookup,
    external_properties: PropsLookup | None = None,
) -> str | None:
    """Resolve a declared version that may be a ``$(Name)`` reference.

    Literal versions are returned unchanged. For a reference, the manifest's
    own properties take precedence over the external table; ``None`` is
    returned when neither defines the property.
    """
    if not declared:
        return declared
    match = VARS_MATCHER.match(declared)
    if not match:
        return declared
    lookup = {**(external_properties or {}), **manifest_properties}
    return lookup.get(match.group(1))
