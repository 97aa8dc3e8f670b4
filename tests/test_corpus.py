from __future__ import annotations

from pathlib import Path

import polars as pl
import pytest

from text_analyzer import ColumnNotFoundError, Pipeline, UnsupportedFormatError
from text_analyzer.config import create_pipeline
from text_analyzer.data.corpus import load_texts, process_column, process_table


@pytest.fixture
def pipeline() -> Pipeline:
    return create_pipeline()


def test_process_column_replaces_text(pipeline: Pipeline) -> None:
    df = pl.DataFrame({"id": [1, 2, 3], "text": ["Dog, can ! bark.;", None, "  A  CAT "]})
    result = process_column(df, pipeline)
    assert result["text"].to_list() == ["dog can bark", "", "a cat"]
    assert result["id"].to_list() == [1, 2, 3]
    assert df["text"].to_list()[1] is None


def test_process_column_to_new_column(pipeline: Pipeline) -> None:
    df = pl.DataFrame({"body": ["Hello, World"]})
    result = process_column(df, pipeline, text_column="body", output_column="clean")
    assert result.columns == ["body", "clean"]
    assert result["clean"].to_list() == ["hello world"]


def test_process_column_missing(pipeline: Pipeline) -> None:
    df = pl.DataFrame({"body": ["x"]})
    with pytest.raises(ColumnNotFoundError) as exc_info:
        process_column(df, pipeline)
    assert "body" in str(exc_info.value)
    assert isinstance(exc_info.value, KeyError)


def test_load_csv_forces_text_dtype(tmp_path: Path) -> None:
    path = tmp_path / "docs.csv"
    path.write_text("id,text\n1,42\n2,Hello\n", encoding="utf-8")
    df = load_texts(path)
    assert df["text"].dtype == pl.Utf8
    assert df["text"].to_list() == ["42", "Hello"]


def test_load_csv_missing_column(tmp_path: Path) -> None:
    path = tmp_path / "docs.csv"
    path.write_text("id,body\n1,x\n", encoding="utf-8")
    with pytest.raises(ColumnNotFoundError):
        load_texts(path)


def test_load_unsupported_format(tmp_path: Path) -> None:
    path = tmp_path / "docs.json"
    path.write_text("{}", encoding="utf-8")
    with pytest.raises(UnsupportedFormatError):
        load_texts(path)


def test_process_table_csv_to_parquet(tmp_path: Path, pipeline: Pipeline) -> None:
    src = tmp_path / "docs.csv"
    src.write_text('text\n"Dog, can ! bark.;"\n"It WAS the best"\n', encoding="utf-8")
    dst = tmp_path / "out" / "docs.parquet"

    written = process_table(src, dst, pipeline, output_column="clean")

    assert written == dst
    df = pl.read_parquet(dst)
    assert df["clean"].to_list() == ["dog can bark", "it was the best"]


def test_process_table_skips_existing(tmp_path: Path, pipeline: Pipeline) -> None:
    src = tmp_path / "docs.parquet"
    pl.DataFrame({"text": ["A, B"]}).write_parquet(src)
    dst = tmp_path / "clean.parquet"
    pl.DataFrame({"text": ["old"]}).write_parquet(dst)

    assert process_table(src, dst, pipeline) is None
    assert pl.read_parquet(dst)["text"].to_list() == ["old"]

    assert process_table(src, dst, pipeline, overwrite=True) == dst
    assert pl.read_parquet(dst)["text"].to_list() == ["a b"]
