"""Tests for manifest loading and subject extraction."""

from pathlib import Path

import pytest

from webpub_subjects import (
    ListWarningLogger,
    ManifestLoadError,
    Subject,
    extract_subjects,
    get_metrics,
    load_manifest,
    load_subjects,
    make_subject_records,
    manifest_base_url,
)

MANIFEST = {
    "metadata": {
        "title": "Moby-Dick",
        "subject": [
            "Whaling",
            {"name": "Fiction", "code": "FIC", "links": [{"href": "subjects/fiction.json"}]},
            {"sortAs": "broken"},
        ],
    },
    "links": [{"rel": "self", "href": "https://example.org/moby/manifest.json"}],
}


def test_extract_subjects() -> None:
    subjects = extract_subjects(MANIFEST)
    assert [s.name for s in subjects] == ["Whaling", "Fiction"]


def test_extract_subjects_without_metadata() -> None:
    assert extract_subjects({}) == []
    assert extract_subjects({"metadata": "x"}) == []
    assert extract_subjects({"metadata": {"title": "No subject"}}) == []


def test_manifest_base_url_from_self_link() -> None:
    assert manifest_base_url(MANIFEST) == "https://example.org/moby/manifest.json"


def test_manifest_base_url_without_absolute_self_link() -> None:
    assert manifest_base_url({}) is None
    assert manifest_base_url({"links": [{"rel": "self", "href": "manifest.json"}]}) is None
    assert manifest_base_url({"links": [{"rel": ["alternate"], "href": "https://example.org/m.json"}]}) is None


def test_load_manifest_from_file(write_manifest) -> None:
    assert load_manifest(write_manifest(MANIFEST)) == MANIFEST


def test_load_manifest_missing_file(tmp_path) -> None:
    with pytest.raises(ManifestLoadError):
        load_manifest(str(tmp_path / "missing.json"))


def test_load_manifest_invalid_json(write_manifest) -> None:
    with pytest.raises(ManifestLoadError, match="invalid JSON"):
        load_manifest(write_manifest("{not json"))


def test_load_manifest_accepts_path_objects(write_manifest) -> None:
    assert load_manifest(Path(write_manifest(MANIFEST))) == MANIFEST


def test_load_manifest_reads_urls_as_paths() -> None:
    # Only local files are read, a URL is never fetched
    with pytest.raises(ManifestLoadError) as excinfo:
        load_manifest("https://example.org/manifest.json")
    assert isinstance(excinfo.value.__cause__, OSError)


def test_load_manifest_not_an_object(write_manifest) -> None:
    with pytest.raises(ManifestLoadError, match="not a JSON object"):
        load_manifest(write_manifest([1, 2]))


def test_load_subjects(write_manifest) -> None:
    path = write_manifest(MANIFEST)
    warnings = ListWarningLogger()
    subjects = load_subjects([path], warnings=warnings)

    assert list(subjects) == [path]
    assert subjects[path][0] == Subject("Whaling")
    # Relative link hrefs resolve against the self link
    assert subjects[path][1].links[0].href == "https://example.org/moby/subjects/fiction.json"
    assert len(warnings) == 1

    metrics = get_metrics()
    assert metrics.manifests_total == 1
    assert metrics.subjects_total == 2
    assert metrics.warnings["missing-required-field"] == 1


def test_load_subjects_with_base_url(write_manifest) -> None:
    path = write_manifest(MANIFEST)
    subjects = load_subjects([path], base_url="https://cdn.example.com/books/")
    assert subjects[path][1].links[0].href == "https://cdn.example.com/books/subjects/fiction.json"


def test_load_subjects_skips_failures(write_manifest, tmp_path) -> None:
    good = write_manifest(MANIFEST)
    missing = str(tmp_path / "missing.json")
    broken = write_manifest("[1, 2]", name="broken.json")
    subjects = load_subjects([missing, good, broken])

    assert list(subjects) == [good]
    assert get_metrics().manifests_failed == 2


def test_make_subject_records() -> None:
    records = make_subject_records({"m.json": extract_subjects(MANIFEST)})
    assert records[1] == {
        "manifest": "m.json",
        "position": 1,
        "name": "Fiction",
        "sort_as": None,
        "scheme": None,
        "code": "FIC",
        "languages": ["und"],
        "link_hrefs": ["subjects/fiction.json"],
    }
