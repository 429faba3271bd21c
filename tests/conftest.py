"""Pytest configuration and fixtures."""


import pytest


@pytest.fixture
def sample_project_json():
    """Sample legacy project.json content for testing."""
    return """
{
  "dependencies": {
    "Microsoft.NETCore.App": {"version": "1.0.0", "type": "platform"},
    "Newtonsoft.Json": "9.0.1",
    "Microsoft.DotNet.Watcher.Tools": {"version": "1.0.0-preview2-final", "type": "build"}
  },
  "frameworks": {
    "netcoreapp1.0": {},
    "net451": {}
  }
}
"""


@pytest.fixture
def sample_packages_config():
    """Sample packages.config content for testing."""
    return """<?xml version="1.0" encoding="utf-8"?>
<packages>
  <package id="jQuery" version="3.2.1" targetFramework="net45" />
  <package id="NUnit" version="3.8.1" targetFramework="net45" developmentDependency="true" />
  <package id="Newtonsoft.Json" version="10.0.3" targetFramework="net461" />
  <package id="Owin" version="1.0" />
</packages>
"""


@pytest.fixture
def sample_csproj():
    """Sample SDK-style project file content for testing."""
    return """<Project Sdk="Microsoft.NET.Sdk">
  <PropertyGroup>
    <TargetFrameworks>netstandard2.0;net472</TargetFrameworks>
    <AssemblyName>Contoso.Core</AssemblyName>
    <SerilogVersion>2.10.0</SerilogVersion>
  </PropertyGroup>
  <ItemGroup>
    <PackageReference Include="Newtonsoft.Json" Version="12.0.3" />
    <PackageReference Include="Serilog" Version="$(SerilogVersion)" />
    <PackageReference Include="StyleCop.Analyzers" Version="1.1.118" developmentDependency="true" />
    <PackageReference Update="Microsoft.NETCore.App" Version="2.1.0" />
  </ItemGroup>
  <ItemGroup Condition="'$(TargetFramework)' == 'net472'">
    <PackageReference Include="System.ValueTuple">
      <Version>4.5.0</Version>
    </PackageReference>
  </ItemGroup>
</Project>
"""


@pytest.fixture
def sample_legacy_csproj():
    """Sample legacy (non-SDK) project file content for testing."""
    return """<?xml version="1.0" encoding="utf-8"?>
<Project ToolsVersion="15.0" xmlns="http://schemas.microsoft.com/developer/msbuild/2003">
  <PropertyGroup>
    <Configuration Condition=" '$(Configuration)' == '' ">Debug</Configuration>
    <RootNamespace>Legacy.App</RootNamespace>
    <AssemblyName>Legacy.App</AssemblyName>
    <TargetFrameworkVersion>v4.7.2</TargetFrameworkVersion>
  </PropertyGroup>
  <ItemGroup>
    <Reference Include="log4net, Version=2.0.8.0, Culture=neutral, PublicKeyToken=669e0ddf0bb1aa2a, processorArchitecture=MSIL" />
    <Reference Include="System" />
    <Reference Include="System.Data" />
  </ItemGroup>
</Project>
"""


@pytest.fixture
def temp_manifest_file(tmp_path):
    """Create a temporary packages.config file for testing."""
    manifest = tmp_path / "packages.config"
    manifest.write_text(
        '<packages><package id="jQuery" version="3.2.1" targetFramework="net45" /></packages>'
    )
    return manifest
