"""Registrar command line entry point.

    python3 registrar.py --wiring wiring.yml --check
"""
import sys

from registrar_lib.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
