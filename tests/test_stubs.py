"""Tests for placeholder source emission (solution_scaffolder.stubs)."""

from __future__ import annotations

from pathlib import Path

import pytest

from solution_scaffolder.config import DomainModule, ScaffoldConfig
from solution_scaffolder.stubs import STUBS, StubEmitter

pytestmark = pytest.mark.unit


class TestStubTable:
    def test_fixed_set(self):
        assert [s.label for s in STUBS] == [
            "validator",
            "versioner",
            "anomaly detector",
            "cloud uploader",
        ]

    def test_outputs_inside_module_dirs(self):
        for stub in STUBS:
            assert stub.output.parts[:2] == ("src", stub.module.value)


class TestStubEmitter:
    async def test_default_writes_all(self, default_config, renderer, tmp_path):
        written = await StubEmitter(default_config, renderer).generate(tmp_path)
        assert [p.relative_to(tmp_path).as_posix() for p in written] == [
            "src/Core/Xml/XmlValidator.cs",
            "src/Core/Versioning/MessageVersioner.cs",
            "src/AI/Services/AnomalyDetector.cs",
            "src/Cloud/Azure/AzureService.cs",
        ]
        assert (tmp_path / "src" / "AI" / "Models").is_dir()
        assert (tmp_path / "src" / "Cloud" / "AWS").is_dir()

    async def test_namespace_uses_project_name(self, renderer, tmp_path):
        config = ScaffoldConfig(project_name="Acme")
        await StubEmitter(config, renderer).generate(tmp_path)
        versioner = (tmp_path / "src/Core/Versioning/MessageVersioner.cs").read_text(encoding="utf-8")
        assert versioner.startswith("namespace Acme.Core.Versioning\n")
        assert "public object UpgradeMessage(object message, string targetVersion)" in versioner
        assert "return message;" in versioner

    async def test_placeholder_bodies(self, default_config, renderer, tmp_path):
        await StubEmitter(default_config, renderer).generate(tmp_path)
        detector = (tmp_path / "src/AI/Services/AnomalyDetector.cs").read_text(encoding="utf-8")
        assert "return new { IsAnomaly = false };" in detector
        azure = (tmp_path / "src/Cloud/Azure/AzureService.cs").read_text(encoding="utf-8")
        assert "public void UploadToBlob(object data)" in azure
        assert "// Azure Blob implementation" in azure
        validator = (tmp_path / "src/Core/Xml/XmlValidator.cs").read_text(encoding="utf-8")
        assert validator.startswith("using System.Xml;\n")
        assert "namespace UltimateIntegrationPlatform.Core.Xml" in validator

    async def test_content_depends_only_on_project_name(self, renderer, tmp_path):
        a = ScaffoldConfig(project_name="Acme", target_framework="net8.0")
        b = ScaffoldConfig(project_name="Acme", target_framework="net9.0", infra_services=["x"])
        await StubEmitter(a, renderer).generate(tmp_path / "a")
        await StubEmitter(b, renderer).generate(tmp_path / "b")
        for stub in STUBS:
            assert (tmp_path / "a" / stub.output).read_bytes() == (
                tmp_path / "b" / stub.output
            ).read_bytes()

    async def test_skips_unconfigured_modules(self, renderer, tmp_path):
        config = ScaffoldConfig(modules=[DomainModule.CORE])
        written = await StubEmitter(config, renderer).generate(tmp_path)
        assert len(written) == 2
        assert not (tmp_path / "src" / "AI").exists()
        assert not (tmp_path / "src" / "Cloud").exists()
