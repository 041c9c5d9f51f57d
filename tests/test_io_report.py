import json

import pytest

from cma_analytics.io import load_adjustment_config, load_cma, load_cma_from_dict, write_report_json
from cma_analytics.report import build_report


def test_load_cma_roundtrip(tmp_path, subject, three_comps):
    path = tmp_path / "cma.json"
    path.write_text(json.dumps({"subject": subject, "comparables": three_comps}), encoding="utf-8")
    loaded_subject, comps = load_cma(path)
    assert loaded_subject["listingId"] == "SUBJ"
    assert [c["listingId"] for c in comps] == ["A1", "B2", "C3"]


def test_properties_alias_and_null_subject():
    subject, comps = load_cma_from_dict({"subject": None, "properties": [{"id": 1}, "junk"]})
    assert subject is None
    assert comps == [{"id": 1}]


@pytest.mark.parametrize(
    "payload",
    [
        [],
        "text",
        {"subject": "nope"},
        {"comparables": {"id": 1}},
    ],
)
def test_malformed_payload_raises(payload):
    with pytest.raises(ValueError):
        load_cma_from_dict(payload)


def test_invalid_json_file(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_cma(path)


def test_adjustment_config():
    rates, overrides = load_adjustment_config({
        "adjustmentRates": {"poolValue": 30000},
        "overrides": {"C1": {"yearBuilt": 0, "custom": [{"name": "View", "value": "2500"}]}},
    })
    assert rates.pool_value == 30000
    assert overrides["C1"].year_built == 0
    assert overrides["C1"].custom == [("View", 2500.0)]
    with pytest.raises(ValueError):
        load_adjustment_config({"overrides": ["C1"]})


def test_build_report(subject, three_comps):
    report = build_report(subject, three_comps)
    assert report["statistics"]["price"]["average"] == 400000
    assert report["statistics"]["pricePerSqFt"]["median"] == 200
    assert report["smartDefaults"]["minPrice"] == 400000
    assert report["subject"]["color"] == "#3b82f6"
    assert [c["status"] for c in report["comparables"]] == ["ACTIVE", "PENDING", "SOLD"]
    assert len(report["adjustments"]) == 3
    assert report["indicatedValue"] > 0
    json.dumps(report)


def test_build_report_without_subject(three_comps):
    report = build_report(None, three_comps)
    assert report["subject"] is None
    assert report["smartDefaults"] == {}
    assert report["adjustments"] == []
    assert report["indicatedValue"] is None


def test_stats_only(subject, three_comps):
    report = build_report(subject, three_comps, stats_only=True)
    assert "adjustments" not in report


def test_write_report_json(tmp_path):
    out = write_report_json({"a": 1}, tmp_path / "nested" / "report.json")
    assert json.loads(out.read_text(encoding="utf-8")) == {"a": 1}


@pytest.mark.parametrize(
    "config",
    [
        {"adjustmentRates": 5},
        {"adjustmentRates": ["sqftPerUnit"]},
        {"overrides": {"C1": {"custom": [5]}}},
        {"overrides": {"C1": {"custom": [None]}}},
        {"overrides": {"C1": {"custom": [["View", 1, 2]]}}},
        {"overrides": {"C1": {"custom": 7}}},
    ],
)
def test_malformed_adjustment_config_raises(config):
    with pytest.raises(ValueError):
        load_adjustment_config(config)


def test_custom_adjustment_pairs():
    _rates, overrides = load_adjustment_config({"overrides": {"C1": {"custom": [["Deck", "1,500"], ("", 10)]}}})
    assert overrides["C1"].custom == [("Deck", 1500.0)]


def test_report_display_labels(subject, three_comps):
    report = build_report(subject, three_comps)
    assert report["subject"]["priceLabel"] == "$500,000"
    assert [c["priceLabel"] for c in report["comparables"]] == ["$300,000", "$500,000", "$400,000"]
    entry = report["adjustments"][0]
    assert entry["adjustedPriceLabel"].startswith("$")
    for line in entry["adjustments"]:
        assert line["label"][0] in "+-$"
    assert report["indicatedValueLabel"].startswith("$")
