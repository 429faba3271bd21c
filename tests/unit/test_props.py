"""Tests for MSBuild property lookup and version resolution."""

from deptree.props import get_properties_map, resolve_version
from deptree.xml_decode import decode_xml


class TestPropertiesMap:
    """Test flattening property groups into a lookup table."""

    def test_no_property_groups(self):
        """Should return an empty table when there is nothing to read."""
        assert get_properties_map({}) == {}
        assert get_properties_map({"Project": ""}) == {}
        assert get_properties_map(decode_xml("<Project><ItemGroup /></Project>")) == {}

    def test_collects_properties_from_all_groups(self):
        """Should read every group, ignoring group attributes."""
        manifest = decode_xml(
            "<Project>"
            "<PropertyGroup><NewtonsoftVersion>12.0.3</NewtonsoftVersion></PropertyGroup>"
            "<PropertyGroup Condition=\"'$(Configuration)' == 'Release'\">"
            "<Optimize>true</Optimize>"
            "</PropertyGroup>"
            "</Project>"
        )

        assert get_properties_map(manifest) == {
            "NewtonsoftVersion": "12.0.3",
            "Optimize": "true",
        }

    def test_later_group_wins(self):
        """A property declared again in a later group replaces the earlier value."""
        manifest = decode_xml(
            "<Project>"
            "<PropertyGroup><SerilogVersion>2.8.0</SerilogVersion></PropertyGroup>"
            "<PropertyGroup><SerilogVersion>2.10.0</SerilogVersion></PropertyGroup>"
            "</Project>"
        )

        assert get_properties_map(manifest)["SerilogVersion"] == "2.10.0"

    def test_attribute_bearing_property_uses_text(self, sample_legacy_csproj):
        """Properties with a Condition attribute resolve to their text."""
        props = get_properties_map(decode_xml(sample_legacy_csproj))

        assert props["Configuration"] == "Debug"
        assert props["TargetFrameworkVersion"] == "v4.7.2"


class TestResolveVersion:
    """Test ``$(Name)`` version resolution."""

    def test_literal_version_unchanged(self):
        assert resolve_version("1.2.3", {}, {}) == "1.2.3"
        assert resolve_version("[1.0,2.0)", {"Foo": "9"}, {}) == "[1.0,2.0)"

    def test_variable_resolved_from_manifest(self):
        assert resolve_version("$(Foo)", {"Foo": "1.2.3"}, {}) == "1.2.3"

    def test_variable_resolved_from_external_props(self):
        assert resolve_version("$(Foo)", {}, {"Foo": "2.0.0"}) == "2.0.0"

    def test_manifest_props_take_precedence(self):
        assert resolve_version("$(Foo)", {"Foo": "1.0.0"}, {"Foo": "2.0.0"}) == "1.0.0"

    def test_missing_variable_returns_none(self):
        assert resolve_version("$(Foo)", {"Bar": "1.0.0"}, {}) is None
        assert resolve_version("$(Foo)", {}, None) is None

    def test_resolution_is_repeatable(self):
        props = {"Foo": "1.2.3"}
        assert resolve_version("$(Foo)", props, {}) == resolve_version("$(Foo)", props, {})

    def test_empty_declaration(self):
        assert resolve_version(None, {"Foo": "1"}, {}) is None
        assert resolve_version("", {"Foo": "1"}, {}) == ""
