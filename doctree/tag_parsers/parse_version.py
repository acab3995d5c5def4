"""Tag parsers for release stages: @alpha, @beta, @internal, @deprecated."""

from typing import Any


def parse_alpha(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "version": "alpha"}


def parse_beta(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "version": "beta"}


def parse_internal(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "version": "internal"}


def parse_deprecated(value: Any, options: dict[str, Any]) -> dict[str, Any]:
    return {**options, "version": "deprecated"}
