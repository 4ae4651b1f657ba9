from __future__ import annotations

import gzip
import json
from dataclasses import fields
from hashlib import sha256
from pathlib import Path
from typing import Any, Mapping

from ..actions import action_from_jsonable, action_to_jsonable
from ..state import State
from ..world.citizens import Citizens
from ..world.economy import Resources
from ..world.land import Land
from .action_log import ActionLog
from .config import SAVE_SCHEMA_VERSION


def _ledger_to_dict(ledger: Any) -> dict[str, Any]:
    return {item.name: getattr(ledger, item.name) for item in fields(ledger)}


def _ledger_from_dict(cls: type, data: Mapping[str, Any]) -> Any:
    names = {item.name for item in fields(cls)}
    unknown = set(data) - names
    if unknown:
        raise ValueError(f"unknown {cls.__name__} fields: {sorted(unknown)}")
    return cls(**{name: data[name] for name in names if name in data})


def state_to_dict(state: State) -> dict[str, Any]:
    return {
        "schema_version": SAVE_SCHEMA_VERSION,
        "seed": state.seed,
        "prev_hash": state.prev_hash,
        "iterations": state.iterations,
        "resources": _ledger_to_dict(state.resources),
        "citizens": _ledger_to_dict(state.citizens),
        "land": _ledger_to_dict(state.land),
        "log": [[action_to_jsonable(entry.action), entry.count] for entry in state.log],
        "nonces": list(state.nonces),
    }


def state_from_dict(data: Mapping[str, Any]) -> State:
    schema = data.get("schema_version", SAVE_SCHEMA_VERSION)
    if schema != SAVE_SCHEMA_VERSION:
        raise ValueError(f"unsupported save schema {schema!r}")
    iterations = int(data["iterations"])
    nonces = tuple(int(nonce) for nonce in data.get("nonces", []))
    if len(nonces) != iterations + 1:
        raise ValueError(f"expected {iterations + 1} nonces for {iterations} iterations, found {len(nonces)}")
    log = ActionLog.from_pairs((action_from_jsonable(action), count) for action, count in data.get("log", []))
    return State(
        seed=int(data["seed"]),
        prev_hash=int(data["prev_hash"]),
        iterations=iterations,
        resources=_ledger_from_dict(Resources, data.get("resources", {})),
        citizens=_ledger_from_dict(Citizens, data.get("citizens", {})),
        land=_ledger_from_dict(Land, data.get("land", {})),
        log=log,
        nonces=nonces,
    )


def dumps_state(state: State, *, indent: int | None = 2) -> str:
    return json.dumps(state_to_dict(state), indent=indent)


def loads_state(raw: str | bytes) -> State:
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    return state_from_dict(json.loads(raw))


def save_state(state: State, path: Path, *, gzip_output: bool | None = None) -> str:
    """Write ``state`` to ``path`` and return the sha256 of the written payload."""

    if gzip_output is None:
        gzip_output = path.suffix.endswith("gz")
    payload = dumps_state(state).encode("utf-8")
    digest = sha256(payload).hexdigest()

    path.parent.mkdir(parents=True, exist_ok=True)
    if gzip_output:
        with gzip.open(path, "wb") as fp:
            fp.write(payload)
    else:
        with open(path, "wb") as fp:
            fp.write(payload)

    return digest


def load_state(path: Path) -> State:
    if not path.exists():
        raise FileNotFoundError(path)

    raw: bytes
    if path.suffix.endswith("gz"):
        with gzip.open(path, "rb") as fp:
            raw = fp.read()
    else:
        with open(path, "rb") as fp:
            raw = fp.read()

    return loads_state(raw)


__all__ = [
    "dumps_state",
    "load_state",
    "loads_state",
    "save_state",
    "state_from_dict",
    "state_to_dict",
]
