"""
Configuration for the AIX tooling.

Loaded from environment variables, optionally seeded from a .env file.
Empty values fall back to defaults.
"""
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from aix_market.valuation.engine import BASELINE_TIME_SECONDS
from aix_market.valuation.weights import AI_TO_AI

logger = logging.getLogger(__name__)


def _env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value else default


@dataclass(frozen=True)
class AixConfig:
    """
    Runtime settings.

    Environment variables:
    - AIX_LOG_LEVEL: logging level (default: INFO)
    - AIX_LOG_JSON: JSON log output (default: false)
    - AIX_DEFAULT_TRANSACTION_TYPE: legacy valuation policy (default: AI↔AI)
    - AIX_BASELINE_TIME_SECONDS: legacy time-score baseline (default: 3600)
    - AIX_CONVERTER_WORKERS: JSONL conversion threads (default: 1)
    - AIX_OUTPUT_DIR: default directory for converted files (default: unset)
    """
    log_level: str = "INFO"
    log_json: bool = False
    default_transaction_type: str = AI_TO_AI
    baseline_time_seconds: float = BASELINE_TIME_SECONDS
    converter_workers: int = 1
    output_dir: Optional[str] = None

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "AixConfig":
        """Load configuration, reading env_file (or ./.env if present) first."""
        if env_file:
            load_dotenv(env_file)
        else:
            env_path = Path.cwd() / ".env"
            if env_path.exists():
                load_dotenv(env_path)
                logger.info(f"Loaded configuration from {env_path}")

        config = cls(
            log_level=_env("AIX_LOG_LEVEL", "INFO").upper(),
            log_json=_env("AIX_LOG_JSON", "false").lower() == "true",
            default_transaction_type=_env("AIX_DEFAULT_TRANSACTION_TYPE", AI_TO_AI),
            baseline_time_seconds=float(
                _env("AIX_BASELINE_TIME_SECONDS", str(BASELINE_TIME_SECONDS))
            ),
            converter_workers=max(1, int(_env("AIX_CONVERTER_WORKERS", "1"))),
            output_dir=os.getenv("AIX_OUTPUT_DIR") or None,
        )
        logger.debug(
            f"Loaded AixConfig: transaction_type={config.default_transaction_type}, "
            f"baseline={config.baseline_time_seconds}, workers={config.converter_workers}"
        )
        return config
