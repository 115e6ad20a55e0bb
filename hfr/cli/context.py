from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from hfr.core.config import CONFIG_FILE_NAME, Config, load_config, load_config_or_default
from hfr.core.result import Err, Ok, Result
from hfr.git.repository import Repository
from hfr.output.console import ConsoleProtocol
from hfr.release.errors import ConfigInvalid


@dataclass(frozen=True, slots=True)
class CLIContext:
    repo: Repository
    config: Config
    console: ConsoleProtocol

    @property
    def root(self) -> Path:
        return self.repo.path


def build_context(
    *,
    repo_dir: Path,
    config_path: Path | None,
    console: ConsoleProtocol,
) -> Result[CLIContext, ConfigInvalid]:
    """Load config and bind the repository the release runs against.

    An explicit `--config` must exist; the default `hfr.toml` is optional.
    """
    root = repo_dir.expanduser().resolve()
    if config_path is None:
        loaded = load_config_or_default(root / CONFIG_FILE_NAME)
    else:
        loaded = load_config(config_path.expanduser())

    match loaded:
        case Err(e):
            return Err(ConfigInvalid(message=e.message, path=e.path))
        case Ok(config):
            return Ok(CLIContext(repo=Repository(root), config=config, console=console))
