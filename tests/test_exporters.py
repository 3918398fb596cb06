"""Tests for exporters and statistics."""

import json

import pandas as pd

from webpub_subjects import (
    Link,
    ParseMetrics,
    Subject,
    export_csv,
    export_subjects_json,
    export_summary_json,
    make_subject_records,
    print_stats,
    subjects_dataframe,
)

SUBJECTS = {
    "b.json": [Subject("Horror", scheme="BISAC", code="FIC015000")],
    "a.json": [
        Subject("Fiction", sort_as="fiction", scheme="BISAC", links=[Link(href="/f"), Link(href="/g")]),
        Subject("Horror"),
    ],
}


def test_subjects_dataframe() -> None:
    df = subjects_dataframe(make_subject_records(SUBJECTS))
    assert list(df.columns) == ["manifest", "position", "name", "sort_as", "scheme", "code", "languages", "link_hrefs"]
    assert len(df) == 3
    assert df.iloc[1]["link_hrefs"] == "/f|/g"
    assert pd.isna(df.iloc[2]["link_hrefs"])


def test_subjects_dataframe_empty() -> None:
    df = subjects_dataframe([])
    assert df.empty
    assert "name" in df.columns


def test_export_csv_keeps_load_order(tmp_path) -> None:
    df = subjects_dataframe(make_subject_records(SUBJECTS))
    path = export_csv(df, tmp_path / "out" / "subjects.csv")
    exported = pd.read_csv(path)
    assert exported["manifest"].tolist() == ["b.json", "a.json", "a.json"]
    assert exported["position"].tolist() == [0, 0, 1]
    assert exported["name"].tolist() == ["Horror", "Fiction", "Horror"]


def test_export_subjects_json(tmp_path) -> None:
    path = export_subjects_json(SUBJECTS, tmp_path / "subjects.json")
    document = json.loads(path.read_text(encoding="utf-8"))
    assert document["b.json"] == [{"name": "Horror", "scheme": "BISAC", "code": "FIC015000"}]
    assert document["a.json"][1] == {"name": "Horror"}


def test_print_stats(tmp_path) -> None:
    df = subjects_dataframe(make_subject_records(SUBJECTS))
    stats = print_stats(df, output_path=tmp_path / "summary.txt")

    assert stats["total"] == 3
    assert stats["manifests"] == 2
    assert stats["unique_names"] == 2
    assert stats["with_scheme"] == 2
    assert stats["with_links"] == 1
    assert stats["scheme_counts"] == {"BISAC": 2}
    assert stats["top_names"]["Horror"] == 2
    assert "Total subjects: 3" in (tmp_path / "summary.txt").read_text()

    path = export_summary_json(stats, tmp_path / "summary.json")
    assert json.loads(path.read_text(encoding="utf-8")) == {"subjects": stats}


def test_export_summary_json_with_metrics(tmp_path) -> None:
    metrics = ParseMetrics()
    metrics.record_manifest(1)
    stats = print_stats(subjects_dataframe(make_subject_records({"m.json": [Subject("Science-fiction \u00e9trang\u00e8re")]})))

    path = export_summary_json(stats, tmp_path / "summary.json", metrics=metrics)
    text = path.read_text(encoding="utf-8")
    summary = json.loads(text)

    assert summary["parse"] == metrics.report()
    assert summary["subjects"]["top_names"] == {"Science-fiction \u00e9trang\u00e8re": 1}
    # Non-ASCII names are written as text, not escapes
    assert "\u00e9trang\u00e8re" in text


def test_print_stats_empty() -> None:
    stats = print_stats(subjects_dataframe([]))
    assert stats["total"] == 0
    assert stats["scheme_counts"] == {}
