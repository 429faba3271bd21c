"""NuGet ``packages.config`` parsing."""

import logging

from .models import DependencyTreeNode, DepType
from .xml_decode import as_list, attributes

logger = logging.getLogger(__name__)


def _package_elements(manifest: dict) -> list[dict]:
    packages = manifest.get("packages") if isinstance(manifest, dict) else None
    if not isinstance(packages, dict):
        return []
    return as_list(packages.get("package"))


def get_dependency_tree_from_packages_config(
    manifest: dict, include_dev: bool = False
) -> DependencyTreeNode:
    """Build a dependency tree from a decoded ``packages.config``.

    Args:
        manifest: The decoded packages.config document
        include_dev: Whether development dependencies go into the tree

    Returns:
        Root node of the dependency tree
    """
    tree = DependencyTreeNode(name="", version="", has_dev_dependencies=False)

    for package in _package_elements(manifest):
        attrs = attributes(package)
        name = attrs.get("id")
        if not name:
            logger.debug("Skipping package element without an id")
            continue

        is_dev = bool(attrs.get("developmentDependency"))
        tree.has_dev_dependencies = tree.has_dev_dependencies or is_dev
        if is_dev and not include_dev:
            continue

        node = DependencyTreeNode(
            name=name,
            version=attrs.get("version", ""),
            dep_type=DepType.dev if is_dev else DepType.prod,
        )
        if attrs.get("targetFramework"):
            node.target_frameworks = [attrs["targetFramework"]]
        tree.dependencies[name] = node

    return tree


def get_target_frameworks_from_packages_config(manifest: dict) -> list[str]:
    """Collect the distinct ``targetFramework`` attributes in first-seen order."""
    frameworks: list[str] = []
    for package in _package_elements(manifest):
        framework = attributes(package).get("targetFramework")
        if framework and framework not in frameworks:
            frameworks.append(framework)
    return frameworks
