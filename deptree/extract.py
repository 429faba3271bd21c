"""Dependency tree extraction from raw manifest text."""

import logging

from . import detect
from .errors import UnsupportedManifestError
from .models import DependencyTreeNode, ExtractionResult, PropsLookup
from .parse_packages_config import (
    get_dependency_tree_from_packages_config,
    get_target_frameworks_from_packages_config,
)
from .parse_project_file import (
    get_dependency_tree_from_project_file,
    get_target_frameworks_from_project_file,
)
from .parse_project_json import (
    get_dependency_tree_from_project_json,
    get_target_frameworks_from_project_assets_json,
    get_target_frameworks_from_project_json,
)
from .props import get_properties_map
from .xml_decode import parse_json_file, parse_xml_file

logger = logging.getLogger(__name__)


async def load_props(content: str) -> PropsLookup:
    """Decode a ``.props`` file into an external property lookup table."""
    manifest = await parse_xml_file(content)
    return get_properties_map(manifest)


async def extract(
    content: str,
    filename: str | None = None,
    dialect: str | None = None,
    include_dev: bool = False,
    props: PropsLookup | None = None,
) -> ExtractionResult:
    """Decode manifest text and build its dependency tree and framework list.

    Args:
        content: Raw manifest text
        filename: Optional filename used to detect the dialect
        dialect: Force a dialect instead of detecting it
        include_dev: Whether development dependencies go into the tree
        props: External properties for ``$(Name)`` versions (project files only)

    Returns:
        The detected dialect, the dependency tree and the target frameworks

    Raises:
        UnsupportedManifestError: If the dialect is not recognized
        InvalidUserInputError: If the text cannot be decoded
    """
    dialect = dialect or detect.identify(content, filename)
    logger.debug(f"Extracting {filename or '<text>'} as {dialect}")

    if dialect == detect.PROJECT_JSON:
        manifest = parse_json_file(content)
        tree = get_dependency_tree_from_project_json(manifest, include_dev)
        frameworks = get_target_frameworks_from_project_json(manifest)
    elif dialect == detect.PROJECT_ASSETS_JSON:
        manifest = parse_json_file(content)
        tree = DependencyTreeNode(name="", version="", has_dev_dependencies=False)
        frameworks = get_target_frameworks_from_project_assets_json(manifest)
    elif dialect == detect.PACKAGES_CONFIG:
        manifest = await parse_xml_file(content)
        tree = get_dependency_tree_from_packages_config(manifest, include_dev)
        frameworks = get_target_frameworks_from_packages_config(manifest)
    elif dialect == detect.PROJECT_FILE:
        manifest = await parse_xml_file(content)
        tree = await get_dependency_tree_from_project_file(manifest, include_dev, props)
        frameworks = get_target_frameworks_from_project_file(manifest)
    else:
        raise UnsupportedManifestError(f"Unsupported manifest dialect: {dialect}")

    return ExtractionResult(dialect=dialect, tree=tree, target_frameworks=frameworks)
