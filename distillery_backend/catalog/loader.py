from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from .builder import build_catalog
from .config import SOURCE_COLUMNS
from .models import Catalog

logger = logging.getLogger(__name__)


class CatalogLoadError(RuntimeError):
    """The bourbon source table could not be read or parsed."""


def _truncate_long_row(fields: list[str]) -> list[str]:
    # Ragged rows: cells beyond the known column sequence are dropped.
    return fields[: len(SOURCE_COLUMNS)]


def read_source_table(path: Path) -> pd.DataFrame:
    """
    Read the bourbon CSV into a DataFrame of trimmed strings.

    The file is read without a header; every line, including the file's
    own header line, is a row. Short rows are padded with empty strings,
    long rows are truncated and blank lines are skipped.
    """
    df = pd.read_csv(
        path,
        header=None,
        names=SOURCE_COLUMNS,
        index_col=False,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
        on_bad_lines=_truncate_long_row,
    )
    df = df.fillna("")
    for col in df.columns:
        df[col] = df[col].astype(str).str.strip()
    return df.reset_index(drop=True)


def load_catalog(path: Path) -> Catalog:
    """Read and build the catalog, raising ``CatalogLoadError`` on any failure."""
    try:
        table = read_source_table(path)
    except (OSError, ValueError, pd.errors.ParserError, pd.errors.EmptyDataError) as exc:
        raise CatalogLoadError(f"Could not load bourbon data from {path}: {exc}") from exc

    if table.empty:
        raise CatalogLoadError(f"Bourbon data file {path} contains no rows")

    logger.info("Loaded %d rows from %s", len(table), path)
    try:
        return build_catalog(table)
    except ValueError as exc:
        raise CatalogLoadError(f"Could not build bourbon catalog from {path}: {exc}") from exc
