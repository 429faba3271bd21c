"""Core data models for deptree."""

from dataclasses import dataclass, field
from enum import Enum

PropsLookup = dict[str, str]


class DepType(str, Enum):
    """Whether a dependency is needed at runtime or only to build."""

    prod = "prod"
    dev = "dev"


@dataclass
class DependencyTreeNode:
    """A package as declared in a manifest, with its direct children."""

    name: str
    version: str
    dependencies: dict[str, "DependencyTreeNode"] = field(default_factory=dict)
    dep_type: DepType | None = None
    has_dev_dependencies: bool | None = None  # root only
    cyclic: bool | None = None  # set by callers assembling trees across manifests
    target_frameworks: list[str] | None = None
    dependencies_with_unknown_versions: list[str] | None = None  # root only

    def to_dict(self) -> dict:
        """Render the node and its children using the tree's wire key names."""
        data: dict = {
            "name": self.name,
            "version": self.version,
            "dependencies": {
                name: child.to_dict() for name, child in self.dependencies.items()
            },
        }
        if self.dep_type is not None:
            data["depType"] = self.dep_type.value
        if self.has_dev_dependencies is not None:
            data["hasDevDependencies"] = self.has_dev_dependencies
        if self.cyclic is not None:
            data["cyclic"] = self.cyclic
        if self.target_frameworks is not None:
            data["targetFrameworks"] = list(self.target_frameworks)
        if self.dependencies_with_unknown_versions is not None:
            data["dependenciesWithUnknownVersions"] = list(
                self.dependencies_with_unknown_versions
            )
        return data


@dataclass(frozen=True)
class ReferenceInclude:
    """Parsed form of a ``<Reference Include="Name, Version=..., ...">`` string."""

    name: str
    version: str | None = None
    culture: str | None = None
    processor_architecture: str | None = None
    public_key_token: str | None = None

    _FIELDS = {
        "Version": "version",
        "Culture": "culture",
        "processorArchitecture": "processor_architecture",
        "PublicKeyToken": "public_key_token",
    }

    @classmethod
    def parse(cls, include: str) -> "ReferenceInclude":
        """Split the comma-separated include string into name and known keys.

        Unknown keys are ignored. A segment without ``=`` yields no value.
        """
        name, *segments = [part.strip() for part in include.split(",")]
        values: dict[str, str | None] = {}
        for segment in segments:
            parts = segment.split("=")
            attr = cls._FIELDS.get(parts[0])
            if attr:
                values[attr] = parts[1] if len(parts) > 1 else None
        return cls(name=name, **values)


@dataclass
class DependenciesDiscoveryResult:
    """Dependencies found by one project-file extraction strategy."""

    dependencies: dict[str, DependencyTreeNode] = field(default_factory=dict)
    has_dev_dependencies: bool = False
    dependencies_with_unknown_versions: list[str] = field(default_factory=list)


@dataclass
class ExtractionResult:
    """Result of extracting a dependency tree from raw manifest text."""

    dialect: str
    tree: DependencyTreeNode
    target_frameworks: list[str]

    def to_dict(self) -> dict:
        return {
            "dialect": self.dialect,
            "tree": self.tree.to_dict(),
            "target_frameworks": list(self.target_frameworks),
        }
