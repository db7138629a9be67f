#!/usr/bin/env python3
"""
02_app_config_file.py - Read the environment from an App.config file

Demonstrates: AppConfigFileSource and the fatal SourceUnavailableError
raised when the file cannot be read
"""
import tempfile
from pathlib import Path

from appsettings import AppConfigFileSource, ConfigReader, SourceUnavailableError

APP_CONFIG = """<?xml version="1.0" encoding="utf-8"?>
<configuration>
  <appSettings>
    <add key="environment" value="Staging" />
  </appSettings>
</configuration>
"""


def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        config_file = Path(tmp) / "App.config"
        config_file.write_text(APP_CONFIG, encoding="utf-8")

        reader = ConfigReader(AppConfigFileSource(config_file))
        print(f"environment is {reader.get_environment()}")

        missing = ConfigReader(AppConfigFileSource(Path(tmp) / "missing.config"))
        try:
            missing.get_environment()
        except SourceUnavailableError as e:
            print(f"fatal: {e} (cause: {e.__cause__})")


if __name__ == "__main__":
    main()
