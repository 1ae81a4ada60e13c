"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlparse

import dotenv

from ledger_tree.domain.constants import DEFAULT_ROOT_NAME_TEMPLATE
from ledger_tree.domain.policies import AggregationPolicy
from ledger_tree.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for reading the ledger and building the tree.

    Attributes:
        backend: Ledger source identifier (sqlalchemy or json).
        ledger_file: Optional path to a JSON export of the ledger.
        field_map: Name of the payload field map (default or legacy).
        aggregation: How duplicated codes roll up into their root.
        root_name_template: Name format for synthesized roots.
        db_url: SQLAlchemy URL of the ledger database, when configured.
    """

    backend: str = "sqlalchemy"
    ledger_file: Optional[Path] = None
    field_map: str = "default"
    aggregation: AggregationPolicy = AggregationPolicy.PER_ROW
    root_name_template: str = DEFAULT_ROOT_NAME_TEMPLATE
    db_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Values from a local .env file are loaded first and never override
        variables already set in the environment.

        Returns:
            LedgerSettings: Settings sourced from environment variables.

        Raises:
            ValueError: If LEDGER_AGGREGATION names no known policy.
        """
        dotenv.load_dotenv()
        backend = os.getenv("LEDGER_BACKEND", "sqlalchemy").strip().lower()
        raw_file = os.getenv("LEDGER_FILE")
        logger = get_app_logger()
        ledger_file = None
        if raw_file:
            ledger_file = cls._normalize_path(raw_file, logger=logger)
        field_map = os.getenv("LEDGER_FIELD_MAP", "default").strip().lower()
        aggregation = AggregationPolicy.parse(
            os.getenv("LEDGER_AGGREGATION", AggregationPolicy.PER_ROW.value)
        )
        root_name_template = os.getenv(
            "LEDGER_ROOT_NAME_TEMPLATE",
            DEFAULT_ROOT_NAME_TEMPLATE,
        )
        db_url = os.getenv("LEDGER_DB_URL", "").strip() or None
        return cls(
            backend=backend,
            ledger_file=ledger_file,
            field_map=field_map,
            aggregation=aggregation,
            root_name_template=root_name_template,
            db_url=db_url,
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the ledger file path or file:// URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Ledger file does not exist at {path}")
        return path


__all__ = ["LedgerSettings"]
