"""YAML wiring files.

A wiring file declares the services of an application so the object graph
can be assembled without hand-written `register` calls:

    log_level: INFO
    thread_safe: true
    services:
      logger:
        type: "myapp.logging:Logger"
        singleton: true
      service:
        type: "myapp.service:Service"
        dependencies: [logger]
      settings:
        instance: {debug: true}

`type` is an import path (`module:attribute`, the attribute may be dotted)
and `instance` a literal YAML value. Entries are registered in file order.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from importlib import import_module
from pathlib import Path
from typing import Any, Callable, List, Optional, Union
import logging

import yaml

from registrar_lib.services.interfaces import ContainerProtocol
from registrar_lib.services.registration import UNSET, Registration

logger = logging.getLogger(__name__)

TEMPLATE = """\
# Registrar wiring file
log_level: INFO
thread_safe: true
services:
  clock:
    type: "datetime:datetime.now"
  settings:
    instance:
      debug: false
  # service:
  #   type: "myapp.service:Service"
  #   singleton: true
  #   dependencies: [settings, clock]
"""


class WiringError(ValueError):
    """Raised for malformed wiring files or entries."""


@dataclass
class ServiceEntry:
    name: str
    type: Optional[str] = None
    instance: Any = UNSET
    singleton: bool = False
    dependencies: List[str] = field(default_factory=list)


@dataclass
class WiringConfig:
    services: List[ServiceEntry] = field(default_factory=list)
    log_level: Optional[str] = None
    thread_safe: bool = True


def create_template() -> str:
    return TEMPLATE


def load_wiring(path: Union[str, Path]) -> WiringConfig:
    """Read and parse the wiring file at `path`.

    A missing file raises `FileNotFoundError`; anything malformed raises
    `WiringError`.
    """
    p = Path(path)
    with p.open('r', encoding='utf-8') as f:
        raw = f.read()
    return parse_wiring(raw)


def parse_wiring(raw: Union[str, bytes]) -> WiringConfig:
    if isinstance(raw, bytes):
        raw = raw.decode('utf-8')
    try:
        data: Any = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise WiringError("invalid wiring format: parse error") from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise WiringError("invalid wiring format: expected mapping")

    services = data.get('services') or {}
    if not isinstance(services, dict):
        raise WiringError("invalid wiring format: 'services' must be a mapping")

    log_level = data.get('log_level')
    if log_level is not None and not isinstance(log_level, str):
        raise WiringError("invalid wiring format: 'log_level' must be a string")

    return WiringConfig(
        services=[_parse_entry(name, body) for name, body in services.items()],
        log_level=log_level,
        thread_safe=_flag(data, 'thread_safe', True, "invalid wiring format"),
    )


def _parse_entry(name: Any, body: Any) -> ServiceEntry:
    if not isinstance(name, str) or not name:
        raise WiringError(f"invalid service name: {name!r}")
    if not isinstance(body, dict):
        raise WiringError(f"service '{name}': expected mapping")

    has_type = 'type' in body
    has_instance = 'instance' in body
    if has_type == has_instance:
        raise WiringError(f"service '{name}': exactly one of 'type' or 'instance' is required")

    if has_instance:
        extra = set(body) - {'instance'}
        if extra:
            raise WiringError(f"service '{name}': instance entries take no {sorted(extra)}")
        return ServiceEntry(name=name, instance=body['instance'])

    type_path = body['type']
    if not isinstance(type_path, str) or not _is_import_path(type_path):
        raise WiringError(f"service '{name}': 'type' must look like 'module:attribute'")
    deps = body.get('dependencies') or []
    if not isinstance(deps, list) or not all(isinstance(d, str) for d in deps):
        raise WiringError(f"service '{name}': 'dependencies' must be a list of names")
    return ServiceEntry(
        name=name,
        type=type_path,
        singleton=_flag(body, 'singleton', False, f"service '{name}'"),
        dependencies=list(deps),
    )


def _flag(data: dict, key: str, default: bool, where: str) -> bool:
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise WiringError(f"{where}: '{key}' must be true or false")
    return value


def _is_import_path(path: str) -> bool:
    module_name, sep, attr_path = path.partition(':')
    if not (sep and module_name and attr_path) or module_name.startswith('.'):
        return False
    return all(attr_path.split('.'))


def import_factory(path: str) -> Callable[..., Any]:
    """Import `module:attribute` and return the attribute."""
    if not _is_import_path(path):
        raise WiringError(f"'{path}' must look like 'module:attribute'")
    module_name, _, attr_path = path.partition(':')
    try:
        obj: Any = import_module(module_name)
    except ImportError as e:
        raise WiringError(f"cannot import module '{module_name}'") from e
    for part in attr_path.split('.'):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise WiringError(f"'{module_name}' has no attribute '{attr_path}'") from e
    if not callable(obj):
        raise WiringError(f"'{path}' is not callable")
    return obj


def apply_wiring(container: ContainerProtocol, wiring: WiringConfig) -> List[Registration]:
    """Register every entry of `wiring` into `container`, in order.

    Container errors (duplicates, cycles) propagate unchanged.
    """
    registrations = []
    for entry in wiring.services:
        if entry.type is None:
            registrations.append(container.register_instance(entry.name, entry.instance))
            continue
        factory = import_factory(entry.type)
        registrations.append(container.register(
            entry.name,
            factory,
            singleton=entry.singleton,
            dependencies=entry.dependencies,
        ))
    logger.info("Applied wiring with %d services", len(registrations))
    return registrations
