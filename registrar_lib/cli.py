"""Command line helper for Registrar wiring files.

Provides CLI parsing and a `main` entry used by `registrar.py`. Exit codes:
0 on success, 1 when the wiring or a service fails, 2 when the wiring file
is missing.
"""
from __future__ import annotations
import argparse
import sys
from typing import Iterable, Optional

from registrar_lib.config.wiring import WiringError, create_template
from registrar_lib.main import Config, create_container
from registrar_lib.services import Container, ContainerError

DEFAULT_WIRING = "wiring.yml"


def get_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="registrar", description="Inspect and check a Registrar wiring file")
    p.add_argument("--wiring", default=DEFAULT_WIRING, help=f"Path to the wiring YAML file (default: {DEFAULT_WIRING})")
    p.add_argument("--print-template", action="store_true", help="Print a wiring template to stdout and exit")
    p.add_argument("--list", action="store_true", help="List registered services")
    p.add_argument("--check", action="store_true", help="Resolve every service and report failures")
    p.add_argument("--resolve", metavar="NAME", help="Resolve NAME and print its repr")
    return p


def parse_args(argv: Optional[Iterable[str]] = None) -> argparse.Namespace:
    parser = get_parser()
    if argv is not None:
        argv = list(argv)
    return parser.parse_args(argv)


def list_services(container: Container) -> None:
    for name in container.names():
        reg = container.registration(name)
        flags = " singleton" if reg.singleton else ""
        deps = ", ".join(reg.dependencies) or "-"
        print(f"{name}\t{reg.kind.value}{flags}\t{deps}")


def check_services(container: Container) -> int:
    """Resolve every registered service. Returns the number of failures."""
    failures = 0
    for name in container.names():
        try:
            container.get(name)
        except ContainerError as e:
            failures += 1
            print(f"FAIL {name}: {e}")
        except Exception as e:
            failures += 1
            print(f"FAIL {name}: construction raised {type(e).__name__}: {e}")
    return failures


def main(argv: Optional[Iterable[str]] = None) -> int:
    args = parse_args(argv)

    if args.print_template:
        sys.stdout.write(create_template())
        return 0

    try:
        container = create_container(Config(wiring_path=args.wiring))
    except FileNotFoundError:
        print(f"Wiring file not found: {args.wiring}. Run `python3 registrar.py --print-template > {args.wiring}` to create one.")
        return 2
    except (WiringError, ContainerError) as e:
        print(f"Invalid wiring in {args.wiring}: {e}")
        return 1

    if args.list:
        list_services(container)

    if args.resolve:
        try:
            print(repr(container.get(args.resolve)))
        except ContainerError as e:
            print(f"Cannot resolve {args.resolve}: {e}")
            return 1
        except Exception as e:
            print(f"Cannot resolve {args.resolve}: construction raised {type(e).__name__}: {e}")
            return 1

    if args.check:
        failures = check_services(container)
        if failures:
            print(f"{failures} of {len(container)} services failed")
            return 1
        print(f"OK: {len(container)} services resolved")

    return 0


def main_entry() -> None:
    sys.exit(main(sys.argv[1:]))
