"""Wiring configuration: declare container registrations in YAML."""

from .wiring import (
    ServiceEntry,
    WiringConfig,
    WiringError,
    apply_wiring,
    create_template,
    load_wiring,
    parse_wiring,
)

__all__ = [
    "ServiceEntry",
    "WiringConfig",
    "WiringError",
    "apply_wiring",
    "create_template",
    "load_wiring",
    "parse_wiring",
]
