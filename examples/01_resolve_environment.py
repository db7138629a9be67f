#!/usr/bin/env python3
"""
01_resolve_environment.py - Resolve the environment from a mapping

Demonstrates: ConfigReader over an in-memory source, including the NOTSET
fallback for unrecognised values
"""
from appsettings import ConfigReader, MappingSource


def main() -> None:
    values = {"environment": "Production"}
    reader = ConfigReader(MappingSource(values))
    print(f"environment is {reader.get_environment()}")

    # Unrecognised values fall back to NOTSET instead of raising
    values["environment"] = "qa"
    print(f"environment is {reader.get_environment()}")


if __name__ == "__main__":
    main()
