"""Output file check run before generation."""

import os

from .config import PluginConfig
from .errors import ConfigurationError

VALID_FILE_EXTENSIONS = (".ts", ".tsx")


def validate_output(config: PluginConfig, output_file: str):
    """Raise ConfigurationError unless the output file is a TypeScript file.

    Skipped entirely when ``config.disable_checks`` is set.
    """
    if config.disable_checks:
        return

    _, extension = os.path.splitext(output_file)
    if extension not in VALID_FILE_EXTENSIONS:
        raise ConfigurationError(
            "The output file must be a typescript file ending with either .ts or .tsx"
        )
