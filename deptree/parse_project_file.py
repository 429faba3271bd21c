"""MSBuild project file (``.csproj``, ``.vbproj``, ``.fsproj``) parsing.

Dependencies are declared in two styles that can coexist in one file:
``<PackageReference Include="Name" Version="1.0.0" />`` items and legacy
``<Reference Include="Name, Version=1.0.0.0, Culture=neutral" />`` items.
Each style is extracted independently and the results are merged, with
``PackageReference`` declarations replacing same-named ``Reference`` ones.
"""

import logging
import re
from typing import Any

from .models import (
    DependenciesDiscoveryResult,
    DependencyTreeNode,
    DepType,
    PropsLookup,
    ReferenceInclude,
)
from .props import get_properties_map, property_groups, resolve_version
from .xml_decode import as_list, attributes, text_value

logger = logging.getLogger(__name__)

CONDITIONAL_FRAMEWORK_PATTERN = re.compile(r"\(TargetFramework\)'\s*==\s*'([\w.]*)'")
NET_FRAMEWORK_PREFIX = ".NETFramework,Version="


def _item_groups(manifest: Any, item_type: str) -> list[dict]:
    project = manifest.get("Project") if isinstance(manifest, dict) else None
    if not isinstance(project, dict):
        return []
    return [
        group
        for group in as_list(project.get("ItemGroup"))
        if isinstance(group, dict) and item_type in group
    ]


def get_conditional_frameworks(condition: str | None) -> list[str]:
    """Return every framework compared against ``$(TargetFramework)``.

    >>> get_conditional_frameworks("'$(TargetFramework)' == 'net472'")
    ['net472']
    """
    if not condition:
        return []
    return CONDITIONAL_FRAMEWORK_PATTERN.findall(condition)


def get_project_name(manifest: Any) -> str:
    """Return the ``PackageId`` or ``AssemblyName`` of the project, if declared."""
    for group in property_groups(manifest):
        if "PackageId" in group or "AssemblyName" in group:
            return (
                text_value(group.get("PackageId"))
                or text_value(group.get("AssemblyName"))
                or ""
            )
    return ""


def _build_node(
    name: str,
    declared_version: str | None,
    is_dev: bool,
    target_frameworks: list[str],
    manifest_props: PropsLookup,
    external_props: PropsLookup,
) -> DependencyTreeNode | None:
    version = resolve_version(declared_version, manifest_props, external_props)
    if not version:
        logger.debug(f"Could not resolve version {declared_version!r} of {name}")
        return None

    node = DependencyTreeNode(
        name=name,
        version=version,
        dep_type=DepType.dev if is_dev else DepType.prod,
    )
    if target_frameworks:
        node.target_frameworks = list(target_frameworks)
    return node


def _add_dependency(
    result: DependenciesDiscoveryResult, name: str, node: DependencyTreeNode | None
) -> None:
    if node is None:
        result.dependencies_with_unknown_versions.append(name)
    else:
        result.dependencies[name] = node


async def get_dependencies_from_package_reference(
    manifest: dict,
    include_dev: bool = False,
    props: PropsLookup | None = None,
) -> DependenciesDiscoveryResult:
    """Extract dependencies declared with ``<PackageReference>`` items.

    Items without an ``Include`` (``Update`` references) are skipped.
    """
    result = DependenciesDiscoveryResult()
    manifest_props = get_properties_map(manifest)

    for group in _item_groups(manifest, "PackageReference"):
        target_frameworks = get_conditional_frameworks(attributes(group).get("Condition"))

        for item in as_list(group["PackageReference"]):
            attrs = attributes(item)
            name = attrs.get("Include")
            if not name:
                logger.debug("Skipping PackageReference without Include")
                continue

            is_dev = bool(attrs.get("developmentDependency"))
            result.has_dev_dependencies = result.has_dev_dependencies or is_dev
            if is_dev and not include_dev:
                continue

            declared = attrs.get("Version") or text_value(item.get("Version"))
            node = _build_node(
                name, declared, is_dev, target_frameworks, manifest_props, props or {}
            )
            _add_dependency(result, name, node)

    return result


async def get_dependencies_from_reference_include(
    manifest: dict,
    include_dev: bool = False,
    props: PropsLookup | None = None,
) -> DependenciesDiscoveryResult:
    """Extract dependencies declared with ``<Reference Include="...">`` items.

    Only the first item group holding ``Reference`` items is read. These
    references carry no development-dependency marker, so every one of them
    is treated as a production dependency.
    """
    result = DependenciesDiscoveryResult()
    groups = _item_groups(manifest, "Reference")
    if not groups:
        return result

    group = groups[0]
    manifest_props = get_properties_map(manifest)
    target_frameworks = get_conditional_frameworks(attributes(group).get("Condition"))

    for item in as_list(group["Reference"]):
        include = attributes(item).get("Include")
        if not include:
            continue
        reference = ReferenceInclude.parse(include)
        if not reference.name:
            continue

        is_dev = False
        result.has_dev_dependencies = result.has_dev_dependencies or is_dev
        if is_dev and not include_dev:
            continue

        node = _build_node(
            reference.name,
            reference.version,
            is_dev,
            target_frameworks,
            manifest_props,
            props or {},
        )
        _add_dependency(result, reference.name, node)

    return result


def merge_dependencies(
    package_reference: DependenciesDiscoveryResult,
    reference_include: DependenciesDiscoveryResult,
) -> DependenciesDiscoveryResult:
    """Overlay ``PackageReference`` results on ``Reference`` results.

    A name declared by both keeps the position it had among the ``Reference``
    items but takes the ``PackageReference`` node.
    """
    dependencies = {**reference_include.dependencies, **package_reference.dependencies}

    def still_unknown(result: DependenciesDiscoveryResult) -> list[str]:
        return [
            name
            for name in result.dependencies_with_unknown_versions
            if name not in dependencies
        ]

    return DependenciesDiscoveryResult(
        dependencies=dependencies,
        has_dev_dependencies=(
            package_reference.has_dev_dependencies or reference_include.has_dev_dependencies
        ),
        dependencies_with_unknown_versions=(
            still_unknown(package_reference) or still_unknown(reference_include)
        ),
    )


async def get_dependency_tree_from_project_file(
    manifest: dict,
    include_dev: bool = False,
    props: PropsLookup | None = None,
) -> DependencyTreeNode:
    """Build a dependency tree from a decoded MSBuild project file.

    Args:
        manifest: The decoded project file
        include_dev: Whether development dependencies go into the tree
        props: External properties (e.g. from Directory.Build.props); the
            project's own properties win on conflicts

    Returns:
        Root node of the dependency tree
    """
    package_reference = await get_dependencies_from_package_reference(
        manifest, include_dev, props
    )
    reference_include = await get_dependencies_from_reference_include(
        manifest, include_dev, props
    )
    merged = merge_dependencies(package_reference, reference_include)

    tree = DependencyTreeNode(
        name=get_project_name(manifest),
        version="",
        dependencies=merged.dependencies,
        has_dev_dependencies=merged.has_dev_dependencies,
    )
    if merged.dependencies_with_unknown_versions:
        tree.dependencies_with_unknown_versions = merged.dependencies_with_unknown_versions
    return tree


def get_target_frameworks_from_project_file(manifest: dict) -> list[str]:
    """Return the frameworks a project file targets.

    The first property group declaring ``TargetFrameworks``,
    ``TargetFrameworkVersion`` or ``TargetFramework`` is used. A
    ``TargetFrameworkVersion`` (legacy projects) is reported in its long
    ``.NETFramework,Version=vX.Y`` form.
    """
    group = next(
        (
            group
            for group in property_groups(manifest)
            if "TargetFramework" in group
            or "TargetFrameworks" in group
            or "TargetFrameworkVersion" in group
        ),
        None,
    )
    if group is None:
        return []

    frameworks: list[str] = []
    for value in as_list(group.get("TargetFrameworks")):
        raw = text_value(value) or ""
        frameworks.extend(framework for framework in raw.split(";") if framework)

    version = text_value(group.get("TargetFrameworkVersion"))
    if version:
        frameworks.append(f"{NET_FRAMEWORK_PREFIX}{version}")

    for value in as_list(group.get("TargetFramework")):
        framework = text_value(value)
        if framework:
            frameworks.append(framework)

    return list(dict.fromkeys(frameworks))
