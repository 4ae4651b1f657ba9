"""Runtime configuration constants."""

from pathlib import Path

# Resources ledger defaults
DEFAULT_PRIMARY_CAPACITY: float = 200.0
DEFAULT_PRODUCTION_MULTIPLIER: float = 1.0
BYPRODUCT_PROBABILITY: float = 0.1  # per unit of primary resource gathered

# Action effects
COLLECT_AMOUNT: float = 1.0
RECRUIT_FOOD_COST: float = 20.0
RECRUIT_FOOD_CONSUMPTION: float = 1.0  # per iteration, per recruited citizen

# Land ledger defaults
DEFAULT_TOTAL_LAND: int = 1000

# Hash chain
U64_MAX: int = (1 << 64) - 1
SEED_BITS: int = 128

# Persistence
SAVE_SCHEMA_VERSION: str = "cliciv_save_v1"
SAVE_FILENAME: str = "cliciv-save.json"
DEFAULT_SAVE_DIR: Path = Path.home() / ".cliciv"
SAVE_PATH_ENV: str = "CLICIV_SAVE"

# Rendering
LOG_DISPLAY_LIMIT: int = 5
