"""
Exporter for aba-ingest.

Writes the tables built by ``batches_to_frames()`` to an output directory
in CSV or Parquet.

Output file naming convention:
  {table_name}.{format}  -- e.g., "transactions.parquet", "summary.csv"

Parquet keeps column dtypes (amounts stay floats, codes stay integers);
CSV is there for spreadsheets and other tools that cannot read Parquet.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Literal

import pandas as pd

from aba_ingest.assembler import Batch
from aba_ingest.exceptions import ExportError
from aba_ingest.frames import batches_to_frames

logger = logging.getLogger(__name__)

_SUPPORTED_FORMATS = {"csv", "parquet"}


def _write_dataframe(
    df: pd.DataFrame,
    path: Path,
    output_format: str,
) -> None:
    """Write a single DataFrame to disk in the specified format.

    Raises:
        ExportError: If writing fails for any reason.
    """
    try:
        if output_format == "csv":
            df.to_csv(path, index=False, encoding="utf-8")
        else:  # parquet
            df.to_parquet(path, index=False, engine="pyarrow")
    except Exception as exc:
        raise ExportError(
            f"Failed to write {path.name} as {output_format}: {exc}"
        ) from exc


def export_frames(
    frames: dict[str, pd.DataFrame],
    output_dir: str | Path,
    output_format: Literal["csv", "parquet"] = "parquet",
) -> list[str]:
    """Write each DataFrame in *frames* to ``{output_dir}/{name}.{format}``.

    The output directory is created recursively if it does not exist.

    Returns:
        List of file paths (as strings) that were written, in the order
        of *frames*.

    Raises:
        ExportError: If *output_format* is unsupported, or if any write fails.
    """
    if output_format not in _SUPPORTED_FORMATS:
        raise ExportError(
            f"Unsupported output format: '{output_format}'. "
            f"Supported formats: {sorted(_SUPPORTED_FORMATS)}"
        )

    out = Path(output_dir)
    out.mkdir(parents=True, exist_ok=True)

    written: list[str] = []
    for table_name, df in frames.items():
        file_path = out / f"{table_name}.{output_format}"
        _write_dataframe(df, file_path, output_format)
        written.append(str(file_path))
        logger.info(
            "Exported table '%s' -> %s (%d rows, %d cols)",
            table_name,
            file_path.name,
            len(df),
            len(df.columns),
        )
    return written


def export_batches(
    batches: Iterable[Batch],
    output_dir: str | Path,
    output_format: Literal["csv", "parquet"] = "parquet",
) -> list[str]:
    """Flatten *batches* with ``batches_to_frames()`` and export every table."""
    return export_frames(batches_to_frames(batches), output_dir, output_format)
