"""Legacy ``project.json`` and ``project.assets.json`` parsing."""

import logging

from .models import DependencyTreeNode, DepType

logger = logging.getLogger(__name__)

BUILD_DEP_TYPE = "build"


def _declared_version(value) -> tuple[str, bool]:
    if isinstance(value, dict):
        return str(value.get("version") or ""), value.get("type") == BUILD_DEP_TYPE
    if isinstance(value, str):
        return value, False
    return "", False


def get_dependency_tree_from_project_json(
    manifest: dict, include_dev: bool = False
) -> DependencyTreeNode:
    """Build a dependency tree from a decoded ``project.json``.

    A dependency value is either a version string or an object with a
    ``version`` and an optional ``type``; ``"build"`` marks a development
    dependency.

    Args:
        manifest: The decoded project.json document
        include_dev: Whether development dependencies go into the tree

    Returns:
        Root node of the dependency tree
    """
    tree = DependencyTreeNode(name="", version="", has_dev_dependencies=False)

    dependencies = manifest.get("dependencies") or {}
    if not isinstance(dependencies, dict):
        return tree

    for name, value in dependencies.items():
        version, is_dev = _declared_version(value)
        tree.has_dev_dependencies = tree.has_dev_dependencies or is_dev
        if is_dev and not include_dev:
            logger.debug(f"Skipping build dependency {name}")
            continue
        tree.dependencies[name] = DependencyTreeNode(
            name=name,
            version=version,
            dep_type=DepType.dev if is_dev else DepType.prod,
        )

    return tree


def get_target_frameworks_from_project_json(manifest: dict) -> list[str]:
    """Return the frameworks declared under ``frameworks``."""
    frameworks = manifest.get("frameworks") or {}
    return list(frameworks) if isinstance(frameworks, dict) else []


def get_target_frameworks_from_project_assets_json(manifest: dict) -> list[str]:
    """Return the restore targets recorded in a ``project.assets.json``."""
    targets = manifest.get("targets") or {}
    return list(targets) if isinstance(targets, dict) else []
