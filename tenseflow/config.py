"""Consolidated runtime configuration (feature flags + table/template versions)."""

from __future__ import annotations

import os
from dataclasses import dataclass

from tenseflow.constants import REFERENCE_BASIC, REFERENCE_EXTENDED, TEMPLATE_SET_V1, TEMPLATE_SET_V2

DEFAULT_ANALYZER_URL = "http://localhost:8081/api/analyzer"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}
_VALID_TEMPLATE_SETS = {TEMPLATE_SET_V1, TEMPLATE_SET_V2}
_VALID_REFERENCE_VERSIONS = {REFERENCE_BASIC, REFERENCE_EXTENDED}


@dataclass(frozen=True)
class TenseFlowConfig:
    extra_attributes: bool = False
    template_set: str = TEMPLATE_SET_V2
    reference_version: str = REFERENCE_EXTENDED
    batch_size: int = 1
    analyzer_url: str = DEFAULT_ANALYZER_URL
    analyzer_timeout: float = 30.0

    def __post_init__(self) -> None:
        if self.template_set not in _VALID_TEMPLATE_SETS:
            raise ValueError(f"template_set must be one of: v1 | v2, got: {self.template_set!r}")
        if self.reference_version not in _VALID_REFERENCE_VERSIONS:
            raise ValueError(
                f"reference_version must be one of: basic | extended, got: {self.reference_version!r}"
            )
        if self.batch_size <= 0:
            raise ValueError(f"batch_size must be > 0, got: {self.batch_size}")
        if self.analyzer_timeout <= 0:
            raise ValueError(f"analyzer_timeout must be > 0, got: {self.analyzer_timeout}")

    def as_payload(self) -> dict:
        return {
            "extra_attributes": self.extra_attributes,
            "template_set": self.template_set,
            "reference_version": self.reference_version,
            "batch_size": self.batch_size,
            "analyzer_url": self.analyzer_url,
            "analyzer_timeout": self.analyzer_timeout,
        }


def _to_bool_env(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false, yes/no, on/off), got: {raw!r}")


def _to_int_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default)).strip()
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got: {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got: {value}")
    return value


def _to_float_env(name: str, default: float) -> float:
    raw = os.getenv(name, str(default)).strip()
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got: {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be > 0, got: {value}")
    return value


def _to_choice_env(name: str, default: str, valid: set) -> str:
    value = os.getenv(name, default).strip().lower()
    if value not in valid:
        raise ValueError(f"{name} must be one of: {' | '.join(sorted(valid))}, got: {value!r}")
    return value


def load_config_from_env() -> TenseFlowConfig:
    return TenseFlowConfig(
        extra_attributes=_to_bool_env("TENSEFLOW_EXTRA_ATTRIBUTES", False),
        template_set=_to_choice_env("TENSEFLOW_TEMPLATE_SET", TEMPLATE_SET_V2, _VALID_TEMPLATE_SETS),
        reference_version=_to_choice_env(
            "TENSEFLOW_REFERENCE_VERSION", REFERENCE_EXTENDED, _VALID_REFERENCE_VERSIONS
        ),
        batch_size=_to_int_env("TENSEFLOW_BATCH_SIZE", 1),
        analyzer_url=os.getenv("TENSEFLOW_ANALYZER_URL", DEFAULT_ANALYZER_URL).strip() or DEFAULT_ANALYZER_URL,
        analyzer_timeout=_to_float_env("TENSEFLOW_ANALYZER_TIMEOUT", 30.0),
    )
