"""The state engine.

A ``State`` is the aggregate root of a save: the seed, the hash chain, the
three ledgers and the compacted action log. It never changes in place; each
transition returns a new generation whose hash commits to its parent through
``prev_hash`` and to a proof-of-work style nonce.

Replaying the log from genesis must land on the exact same hash, which is
how ``check`` detects a save that was edited by hand.
"""

from __future__ import annotations

import logging
import random
import secrets
import struct
from dataclasses import dataclass, replace
from hashlib import sha256
from typing import Callable, Iterable, Optional, Sequence, Tuple, Union

from .actions import Action
from .errors import HashMismatch, InvalidStateRecreation, IterationError
from .runtime.action_log import ActionLog
from .runtime.commit import max_hash, search_nonce
from .runtime.config import SEED_BITS, U64_MAX
from .runtime.rng_service import iteration_rng
from .world.citizens import Citizens
from .world.economy import Resources
from .world.land import Land

logger = logging.getLogger(__name__)

_U64 = struct.Struct("<Q")
_HEADER = struct.Struct("<QQ")
_LEDGERS = struct.Struct("<QQQ")
_SEED_MIN = -(1 << (SEED_BITS - 1))
_SEED_MAX = (1 << (SEED_BITS - 1)) - 1


@dataclass(frozen=True, slots=True)
class State:
    seed: int
    prev_hash: int = 0
    iterations: int = 0
    resources: Resources = Resources()
    citizens: Citizens = Citizens()
    land: Land = Land()
    log: ActionLog = ActionLog()
    nonces: Tuple[int, ...] = ()

    def __post_init__(self) -> None:
        if not _SEED_MIN <= self.seed <= _SEED_MAX:
            raise ValueError(f"seed must fit in a signed {SEED_BITS}-bit integer")
        if not 0 <= self.prev_hash <= U64_MAX:
            raise ValueError("prev_hash must fit in an unsigned 64-bit integer")
        if self.iterations < 0:
            raise ValueError("iterations must not be negative")
        if any(not 0 <= nonce <= U64_MAX for nonce in self.nonces):
            raise ValueError("nonces must fit in an unsigned 64-bit integer")

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def genesis(cls, seed: int) -> "State":
        return cls(seed=seed)._commit()

    @classmethod
    def random_genesis(cls, rng: Optional[random.Random] = None) -> "State":
        """Start a new game from a fresh random seed (``secrets`` unless ``rng`` is given)."""

        bits = rng.getrandbits(SEED_BITS) if rng is not None else secrets.randbits(SEED_BITS)
        if bits > _SEED_MAX:
            bits -= 1 << SEED_BITS
        return cls.genesis(bits)

    # ------------------------------------------------------------------
    # Hash chain
    # ------------------------------------------------------------------
    @property
    def nonce(self) -> int:
        if not self.nonces:
            raise ValueError("state has no committed nonce")
        return self.nonces[-1]

    def _hasher(self) -> Callable[[int], int]:
        base = sha256(self.seed.to_bytes(SEED_BITS // 8, "little", signed=True))
        base.update(_HEADER.pack(self.prev_hash, self.iterations))
        ledgers = _LEDGERS.pack(self.resources.digest(), self.citizens.digest(), self.land.digest())

        def hash_for(nonce: int) -> int:
            hasher = base.copy()
            hasher.update(_U64.pack(nonce))
            hasher.update(ledgers)
            return int.from_bytes(hasher.digest()[:8], "big", signed=False)

        return hash_for

    def hash(self, nonce: Optional[int] = None) -> int:
        return self._hasher()(self.nonce if nonce is None else nonce)

    def _commit(self) -> "State":
        nonce = search_nonce(self._hasher(), self.iterations)
        logger.debug(
            "committed iteration %d with nonce %d (ceiling %#018x)", self.iterations, nonce, max_hash(self.iterations)
        )
        return replace(self, nonces=self.nonces + (nonce,))

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------
    def apply_action(self, action: Action) -> "State":
        """Run one iteration. Raises ``IterationError`` and leaves ``self`` untouched on failure."""

        prev_hash = self.hash()
        rng = iteration_rng(self.seed, prev_hash)
        resources = self.resources.work(rng).apply_action(action, rng)
        citizens = self.citizens.apply_action(action)
        land = self.land.apply_action(action)
        candidate = replace(
            self,
            prev_hash=prev_hash,
            iterations=self.iterations + 1,
            resources=resources,
            citizens=citizens,
            land=land,
            log=self.log.append(action),
        )
        return candidate._commit()

    def repeat(self, times: int, action: Action) -> "State":
        if times < 0:
            raise ValueError(f"cannot repeat an action {times} times")
        state = self
        for _ in range(times):
            state = state.apply_action(action)
        return state

    def apply_log(self, entries: Union[ActionLog, Iterable[Sequence[object]]]) -> "State":
        state = self
        for action, count in entries:
            state = state.repeat(count, action)  # type: ignore[arg-type]
        return state

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------
    def check(self) -> None:
        """Replay the whole log from genesis and raise ``CheckError`` on any divergence."""

        replayed = State.genesis(self.seed)
        for iteration, action in enumerate(self.log.actions()):
            try:
                replayed = replayed.apply_action(action)
            except IterationError as error:
                logger.info("replay failed at iteration %d: %s", iteration, error)
                raise InvalidStateRecreation(iteration, error) from error

        if replayed.iterations != self.iterations or replayed.nonces != self.nonces:
            logger.info("replay diverged: %d iterations recorded, %d replayed", self.iterations, replayed.iterations)
            raise HashMismatch()
        if replayed.hash(self.nonce) != self.hash(self.nonce):
            logger.info("replay diverged: final hash mismatch at iteration %d", self.iterations)
            raise HashMismatch()
        logger.debug("replayed %d iterations, hash %#018x", self.iterations, self.hash())

    def is_valid(self) -> bool:
        try:
            self.check()
        except (HashMismatch, InvalidStateRecreation):
            return False
        return True


__all__ = ["State"]
