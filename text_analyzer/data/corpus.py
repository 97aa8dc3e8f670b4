# data/corpus.py
import logging
from pathlib import Path

import polars as pl

from text_analyzer.preprocessing.errors import ColumnNotFoundError, UnsupportedFormatError
from text_analyzer.preprocessing.pipeline import Pipeline

logger = logging.getLogger(__name__)


def process_column(
    df: pl.DataFrame,
    pipeline: Pipeline,
    text_column: str = "text",
    output_column: str | None = None,
) -> pl.DataFrame:
    """
    Runs the pipeline over every row of a text column.

    Nulls are treated as empty strings. With output_column=None the text column
    is replaced in place, otherwise the result is added as a new column.
    """
    if text_column not in df.columns:
        raise ColumnNotFoundError(text_column, df.columns)

    processed = [
        pipeline.process("" if text is None else str(text)) for text in df[text_column].to_list()
    ]
    return df.with_columns(pl.Series(output_column or text_column, processed, dtype=pl.Utf8))


def load_texts(path: str | Path, text_column: str = "text") -> pl.DataFrame:
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        header = pl.read_csv(path, n_rows=0).columns
        if text_column not in header:
            raise ColumnNotFoundError(text_column, header)
        # Force the text column to string, polars would infer numbers otherwise
        df = pl.read_csv(path, schema_overrides={text_column: pl.Utf8})
    elif suffix == ".parquet":
        df = pl.read_parquet(path)
    else:
        raise UnsupportedFormatError(f"Unsupported table format: {path.name} (expected .csv or .parquet)")

    if text_column not in df.columns:
        raise ColumnNotFoundError(text_column, df.columns)
    return df


def process_table(
    src: str | Path,
    dst: str | Path,
    pipeline: Pipeline,
    text_column: str = "text",
    output_column: str | None = None,
    overwrite: bool = False,
) -> Path | None:
    """
    Processes a CSV or Parquet file and writes the result as Parquet.

    Returns the written path, or None if dst already exists and overwrite is False.
    """
    src = Path(src)
    dst = Path(dst)
    if dst.exists() and not overwrite:
        logger.info("Skipping (already exists): %s", dst.name)
        return None

    logger.info("Processing: %s -> %s", src.name, dst.name)
    df = process_column(load_texts(src, text_column), pipeline, text_column, output_column)
    dst.parent.mkdir(parents=True, exist_ok=True)
    df.write_parquet(dst)
    logger.info("Wrote %d rows to %s", df.height, dst.name)
    return dst
