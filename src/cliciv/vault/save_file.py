"""Save-file location and persistence for the command line driver."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from ..errors import SaveFileError
from ..runtime.config import DEFAULT_SAVE_DIR, SAVE_FILENAME, SAVE_PATH_ENV
from ..runtime.snapshot import load_state, save_state
from ..state import State

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SaveConfig:
    path: Path = DEFAULT_SAVE_DIR / SAVE_FILENAME
    gzip_output: bool = False

    @classmethod
    def resolve(cls, path: Optional[Path] = None, *, environ: Optional[Mapping[str, str]] = None) -> "SaveConfig":
        """Explicit path first, then ``$CLICIV_SAVE``, then ``~/.cliciv/cliciv-save.json``."""

        env = os.environ if environ is None else environ
        if path is None and env.get(SAVE_PATH_ENV):
            path = Path(env[SAVE_PATH_ENV])
        if path is None:
            return cls()
        path = Path(path).expanduser()
        return cls(path=path, gzip_output=path.suffix.endswith("gz"))


class SaveFile:
    def __init__(self, config: SaveConfig) -> None:
        self.config = config

    @property
    def path(self) -> Path:
        return self.config.path

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> State:
        try:
            state = load_state(self.path)
        except FileNotFoundError as exc:
            raise SaveFileError(f"no save file at {self.path}; run 'cliciv create' first") from exc
        except (OSError, json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise SaveFileError(f"could not read save file {self.path}: {exc}") from exc
        except (KeyError, TypeError, ValueError) as exc:
            raise SaveFileError(f"save file {self.path} is malformed: {exc}") from exc
        logger.info("loaded save %s at iteration %d", self.path, state.iterations)
        return state

    def write(self, state: State) -> str:
        try:
            digest = save_state(state, self.path, gzip_output=self.config.gzip_output)
        except OSError as exc:
            raise SaveFileError(f"could not write save file {self.path}: {exc}") from exc
        logger.info("wrote save %s at iteration %d (sha256 %s)", self.path, state.iterations, digest[:16])
        return digest


__all__ = ["SaveConfig", "SaveFile"]
