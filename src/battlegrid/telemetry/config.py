"""Telemetry configuration helpers."""

from __future__ import annotations

import os
from functools import lru_cache
from typing import Any, Dict

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "on"}


def _bool_from_env(*names: str) -> bool | None:
    for name in names:
        value = os.getenv(name)
        if value is not None:
            return value.strip().lower() in _TRUTHY
    return None


def _with_suffix(base: str | None, suffix: str) -> str | None:
    if not base:
        return None
    return f"{base.rstrip('/')}/{suffix}"


class TelemetryConfig(BaseModel):
    """Runtime configuration for telemetry exporters."""

    enable_tracing: bool = False
    enable_metrics: bool = False
    enable_logging: bool = False
    otlp_traces_endpoint: str | None = None
    otlp_metrics_endpoint: str | None = None
    otlp_logs_endpoint: str | None = None
    service_name: str = "battlegrid"
    service_namespace: str = "combat"
    resource_attributes: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_env(cls, **overrides: Any) -> "TelemetryConfig":
        """Construct config from env vars (`BATTLEGRID_*` + `OTEL_*`).

        Explicit ``overrides`` win over the environment for endpoints; enable
        flags found in the environment always apply.
        """

        data: Dict[str, Any] = cls().model_dump()
        data.update(overrides)

        bool_fields = {
            "enable_tracing": ("BATTLEGRID_ENABLE_TRACING", "OTEL_TRACES_ENABLED"),
            "enable_metrics": ("BATTLEGRID_ENABLE_METRICS", "OTEL_METRICS_ENABLED"),
            "enable_logging": ("BATTLEGRID_ENABLE_LOGGING", "OTEL_LOGS_ENABLED"),
        }
        for field, env_names in bool_fields.items():
            env_value = _bool_from_env(*env_names)
            if env_value is not None:
                data[field] = env_value

        base_endpoint = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
        endpoints = {
            "otlp_traces_endpoint": (
                os.getenv("OTEL_EXPORTER_OTLP_TRACES_ENDPOINT") or _with_suffix(base_endpoint, "v1/traces")
            ),
            "otlp_metrics_endpoint": (
                os.getenv("OTEL_EXPORTER_OTLP_METRICS_ENDPOINT") or _with_suffix(base_endpoint, "v1/metrics")
            ),
            "otlp_logs_endpoint": (
                os.getenv("OTEL_EXPORTER_OTLP_LOGS_ENDPOINT") or _with_suffix(base_endpoint, "v1/logs")
            ),
        }
        for field, value in endpoints.items():
            if data.get(field) is None:
                data[field] = value

        service_name = os.getenv("OTEL_SERVICE_NAME")
        service_namespace = os.getenv("OTEL_SERVICE_NAMESPACE")
        if service_name:
            data["service_name"] = service_name
        if service_namespace:
            data["service_namespace"] = service_namespace

        resource_env = os.getenv("OTEL_RESOURCE_ATTRIBUTES")
        if resource_env:
            attrs = {**data.get("resource_attributes", {})}
            for part in resource_env.split(","):
                if "=" not in part:
                    continue
                key, value = part.split("=", 1)
                attrs[key.strip()] = value.strip()
            data["resource_attributes"] = attrs

        # Configured endpoints switch their signal on.
        if data.get("otlp_traces_endpoint"):
            data["enable_tracing"] = True
        if data.get("otlp_metrics_endpoint"):
            data["enable_metrics"] = True
        if data.get("otlp_logs_endpoint"):
            data["enable_logging"] = True

        return cls(**data)

    def resource_dict(self) -> dict[str, str]:
        """Resource attributes shared by every exporter."""
        attributes = {
            "service.name": self.service_name,
            "service.namespace": self.service_namespace,
        }
        attributes.update(self.resource_attributes)
        return attributes


@lru_cache(maxsize=1)
def load_telemetry_config() -> TelemetryConfig:
    """Load and cache telemetry config from the environment."""

    return TelemetryConfig.from_env()


def init_telemetry(config: TelemetryConfig | None = None) -> TelemetryConfig:
    """Initialise telemetry subsystems lazily."""

    from .logger import init_logging
    from .metrics import init_metrics
    from .tracer import init_tracing

    resolved = config or load_telemetry_config()

    if resolved.enable_tracing:
        init_tracing(resolved)
    if resolved.enable_metrics:
        init_metrics(resolved)
    if resolved.enable_logging:
        init_logging(resolved)
    return resolved
