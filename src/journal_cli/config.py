"""Journal configuration stored as journal-cli.yaml."""

import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

import yaml

from .core.templates import JOURNAL_TEMPLATE
from .errors import ConfigNotFound, ConfigParseError

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "journal-cli.yaml"


class _ConfigDumper(yaml.SafeDumper):
    """SafeDumper that writes multi-line strings as literal blocks."""


def _represent_str(dumper: yaml.SafeDumper, value: str) -> yaml.Node:
    if "\n" in value:
        return dumper.represent_scalar("tag:yaml.org,2002:str", value, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", value)


_ConfigDumper.add_representer(str, _represent_str)


@dataclass
class JournalConfig:
    """Path conventions and entry template for one journal."""

    entry_path: str
    article_path: str
    journal_template: str

    @classmethod
    def for_root(cls, root: Path) -> "JournalConfig":
        """Default config for a journal rooted at an absolute directory."""
        return cls(
            entry_path=f"{root}/entries",
            article_path=f"{root}/articles",
            journal_template=JOURNAL_TEMPLATE,
        )

    def to_yaml(self) -> str:
        return yaml.dump(
            asdict(self),
            Dumper=_ConfigDumper,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )

    @classmethod
    def from_yaml(cls, text: str) -> "JournalConfig":
        """Parse config text, raising ConfigParseError if it does not fit the schema."""
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigParseError(f"{CONFIG_FILE_NAME}: invalid YAML: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigParseError(f"{CONFIG_FILE_NAME}: expected a mapping of settings")

        names = [f.name for f in fields(cls)]
        values = {}
        for name in names:
            if name not in raw:
                raise ConfigParseError(f"{CONFIG_FILE_NAME}: missing field '{name}'")
            value = raw[name]
            if not isinstance(value, str):
                raise ConfigParseError(
                    f"{CONFIG_FILE_NAME}: field '{name}' must be a string, "
                    f"got {type(value).__name__}"
                )
            values[name] = value

        for key in raw:
            if key not in names:
                logger.warning(f"Ignoring unknown key in {CONFIG_FILE_NAME}: {key}")

        return cls(**values)


def config_path(cwd: Path) -> Path:
    return Path(cwd) / CONFIG_FILE_NAME


def load_config(cwd: Path) -> JournalConfig:
    """Load journal-cli.yaml from the working directory."""
    path = config_path(cwd)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigNotFound(f"{CONFIG_FILE_NAME}: not found in {cwd}", path) from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(f"{CONFIG_FILE_NAME}: {e}", path) from e

    try:
        config = JournalConfig.from_yaml(text)
    except ConfigParseError as e:
        e.path = path
        raise
    logger.debug(f"Loaded config from {path}")
    return config
