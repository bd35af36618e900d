"""Solution scaffolder configuration.

Centralised, typed configuration for a scaffolding run.  The configuration is
an immutable Pydantic v2 model so it can be validated once at load time and
then passed explicitly into every component of the generator.
"""

from __future__ import annotations

import json
import os
import re
from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class DomainModule(str, Enum):
    """A functional area that receives its own library and test project."""

    CORE = "Core"
    WORKFLOWS = "Workflows"
    ADAPTERS = "Adapters"
    MONITORING = "Monitoring"
    SECURITY = "Security"
    DATA_TRANSFORMATION = "DataTransformation"
    AI = "AI"
    CLOUD = "Cloud"


# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_PROJECT_NAME = "UltimateIntegrationPlatform"

DEFAULT_MODULES: tuple[DomainModule, ...] = tuple(DomainModule)

DEFAULT_INFRA_SERVICES: tuple[str, ...] = (
    "rabbitmq",
    "kafka",
    "postgres",
    "sqlserver",
    "mongodb",
    "redis",
    "vault",
    "consul",
    "prometheus",
    "grafana",
    "jaeger",
    "azure-emulator",
    "aws-localstack",
)

DEFAULT_PACKAGES: dict[DomainModule, tuple[str, ...]] = {
    DomainModule.CORE: (
        "WorkflowCore",
        "MassTransit",
        "SoapCore",
        "MediatR",
        "Polly",
        "Azure.Messaging.EventGrid",
        "Google.Cloud.PubSub.V1",
    ),
    DomainModule.WORKFLOWS: ("Elsa.Core", "Airflow.NET", "Azure.DurableTask"),
    DomainModule.ADAPTERS: ("HotChocolate.AspNetCore", "MQTTnet", "Grpc.AspNetCore"),
    DomainModule.MONITORING: ("OpenTelemetry", "Serilog.AspNetCore", "Seq"),
    DomainModule.SECURITY: (
        "IdentityServer4",
        "AspNetCoreRateLimit",
        "Microsoft.Identity.Web",
    ),
    DomainModule.DATA_TRANSFORMATION: ("SaxonHE", "Scriban", "DynamicExpresso"),
    DomainModule.AI: ("Microsoft.ML", "TorchSharp", "Pythonnet"),
    DomainModule.CLOUD: ("AWSSDK.SQS", "AWSSDK.S3", "Azure.Storage.Blobs"),
}

DEFAULT_REQUIRED_TOOLS: tuple[str, ...] = ("dotnet", "docker", "git", "helm")

_NAMESPACE_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$")

_KNOWN_MODULES: dict[str, DomainModule] = {m.value: m for m in DomainModule}


# ---------------------------------------------------------------------------
# Configuration model
# ---------------------------------------------------------------------------


class ScaffoldConfig(BaseModel):
    """Everything that determines the output of a scaffolding run.

    Instances are frozen.  They are created once by the CLI entry point (from
    the embedded defaults, a JSON/YAML file or the environment) and handed to
    ``SolutionGenerator``.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(
        default=DEFAULT_PROJECT_NAME,
        description="Solution name, also the root C# namespace",
    )
    modules: tuple[DomainModule, ...] = Field(
        default=DEFAULT_MODULES,
        description="Domain modules in generation order",
    )
    infra_services: tuple[str, ...] = Field(
        default=DEFAULT_INFRA_SERVICES,
        description="Infrastructure services expected in the local container environment",
    )
    packages: Mapping[DomainModule, tuple[str, ...]] = Field(
        default_factory=lambda: MappingProxyType(dict(DEFAULT_PACKAGES)),
        description="NuGet package identifiers per domain module, in install order",
    )
    target_framework: str = Field(default="net8.0")
    host_project: str = Field(default="Host", description="Web API entry-point project")
    required_tools: tuple[str, ...] = Field(default=DEFAULT_REQUIRED_TOOLS)
    command_timeout: int = Field(
        default=600, ge=1, description="Per-command timeout in seconds"
    )

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    @model_validator(mode="before")
    @classmethod
    def _default_packages(cls, data: Any) -> Any:
        """Fill ``packages`` from the defaults for the configured modules only."""
        if not isinstance(data, dict) or "packages" in data:
            return data
        modules = data.get("modules", DEFAULT_MODULES)
        packages: dict[DomainModule, tuple[str, ...]] = {}
        for module in modules:
            key = module.value if isinstance(module, DomainModule) else str(module)
            if key in _KNOWN_MODULES:
                known = _KNOWN_MODULES[key]
                packages[known] = DEFAULT_PACKAGES[known]
        return {**data, "packages": packages}

    @field_validator("project_name", "host_project")
    @classmethod
    def _valid_namespace(cls, value: str) -> str:
        if not _NAMESPACE_RE.match(value):
            raise ValueError(f"'{value}' is not a valid C# identifier")
        return value

    @field_validator("modules")
    @classmethod
    def _unique_modules(cls, value: tuple[DomainModule, ...]) -> tuple[DomainModule, ...]:
        seen: set[DomainModule] = set()
        for module in value:
            if module in seen:
                raise ValueError(f"Duplicate domain module: {module.value}")
            seen.add(module)
        return value

    @field_validator("packages")
    @classmethod
    def _read_only_packages(
        cls, value: Mapping[DomainModule, tuple[str, ...]]
    ) -> Mapping[DomainModule, tuple[str, ...]]:
        return MappingProxyType(dict(value))

    @field_serializer("packages")
    def _dump_packages(
        self, value: Mapping[DomainModule, tuple[str, ...]]
    ) -> dict[str, list[str]]:
        return {module.value: list(ids) for module, ids in value.items()}

    @field_validator("infra_services", "required_tools")
    @classmethod
    def _no_blank_names(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not name.strip() for name in value):
            raise ValueError("Names must not be blank")
        return value

    @model_validator(mode="after")
    def _packages_match_modules(self) -> "ScaffoldConfig":
        unknown = [m.value for m in self.packages if m not in self.modules]
        if unknown:
            raise ValueError(
                f"Packages configured for modules that are not generated: {', '.join(unknown)}"
            )
        return self

    # ------------------------------------------------------------------
    # Derived paths (relative to the output root)
    # ------------------------------------------------------------------

    def library_dir(self, module: DomainModule) -> Path:
        """Directory of the class library project for *module*."""
        return Path("src") / module.value

    def test_dir(self, module: DomainModule) -> Path:
        """Directory of the xUnit test project for *module*."""
        return Path("tests") / f"{module.value}.Tests"

    @property
    def host_dir(self) -> Path:
        """Directory of the minimal Web API host project."""
        return Path("src") / self.host_project

    def packages_for(self, module: DomainModule) -> tuple[str, ...]:
        """Package identifiers for *module*, empty when none are configured."""
        return self.packages.get(module, ())

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: str | Path) -> "ScaffoldConfig":
        """Load a configuration from a JSON or YAML file.

        Fields omitted from the file fall back to the embedded defaults.

        Raises:
            ValueError: If the file suffix is not ``.json``, ``.yml`` or ``.yaml``,
                or the file cannot be parsed.
            pydantic.ValidationError: If the content is invalid.
        """
        file_path = Path(path)
        raw = file_path.read_text(encoding="utf-8")
        suffix = file_path.suffix.lower()
        if suffix == ".json":
            data = json.loads(raw)
        elif suffix in (".yml", ".yaml"):
            try:
                data = yaml.safe_load(raw) or {}
            except yaml.YAMLError as exc:
                raise ValueError(f"Malformed YAML in {file_path.name}: {exc}") from exc
        else:
            raise ValueError(f"Unsupported configuration format: {file_path.name}")
        if not isinstance(data, dict):
            raise ValueError(f"Configuration root must be a mapping: {file_path.name}")
        return cls.model_validate(data)

    @classmethod
    def from_env(cls) -> "ScaffoldConfig":
        """Build a ``ScaffoldConfig`` from environment variables.

        Recognised variables (all optional):
            SCAFFOLD_PROJECT_NAME, SCAFFOLD_TARGET_FRAMEWORK,
            SCAFFOLD_COMMAND_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("SCAFFOLD_PROJECT_NAME"):
            kwargs["project_name"] = os.environ["SCAFFOLD_PROJECT_NAME"]
        if os.environ.get("SCAFFOLD_TARGET_FRAMEWORK"):
            kwargs["target_framework"] = os.environ["SCAFFOLD_TARGET_FRAMEWORK"]
        if os.environ.get("SCAFFOLD_COMMAND_TIMEOUT"):
            kwargs["command_timeout"] = int(os.environ["SCAFFOLD_COMMAND_TIMEOUT"])
        return cls(**kwargs)
