from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_DEFAULT_CSV = Path(__file__).resolve().parent / "data" / "bourbonlouisville.csv"


@dataclass(frozen=True)
class AppConfig:
    csv_path: Path = Path(os.getenv("BOURBON_CSV_PATH", str(_DEFAULT_CSV)))
    strategy: str = os.getenv("RECOMMENDER_STRATEGY", "flavor_similarity")
    similarity_top_n: int = int(os.getenv("SIMILARITY_TOP_N", "4"))
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")


DEFAULT_APP_CONFIG = AppConfig()
