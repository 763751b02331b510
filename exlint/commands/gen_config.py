"""
The `gen.config` command: writes the default configuration file.
"""

from pathlib import Path

import click

from exlint.commands.base import OK, Command
from exlint.core.config_file import CONFIG_FILENAME, ConfigFile
from exlint.core.exceptions import ConfigurationError


class GenConfigCommand(Command):
    SHORT_DESCRIPTION = f"Initialize {CONFIG_FILENAME} with the default configuration"

    def run(self, directory, execution):
        target = Path(directory)
        if not target.is_dir():
            raise ConfigurationError(
                f"Not a directory: {directory}",
                details={"path": directory},
            )

        config_path = target / CONFIG_FILENAME
        if config_path.exists():
            click.echo(f"{config_path} already exists, not overwriting it", err=True)
            return OK

        ConfigFile.save_to_file(config_path)
        click.echo(f"Configuration saved to: {config_path}")
        return OK
