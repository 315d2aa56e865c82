import json
import os

import pytest

from scripts.summarize_month import load_transactions, summarize, main

SAMPLE = os.path.join(os.path.dirname(__file__), "data", "transactions_sample.json")


def test_summarize_march():
    result = summarize(load_transactions(SAMPLE), "March")
    assert result["statistics"] == {
        "month": "March",
        "totalSaleAmount": 1150,
        "totalSoldItems": 3,
        "totalNotSoldItems": 1,
    }
    assert len(result["barChartData"]) == 10
    assert sum(c["count"] for c in result["pieChartData"]) == 4


def test_main_json_output(capsys):
    assert main([SAMPLE, "--month", "July", "--json"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["statistics"]["totalSoldItems"] == 1
    assert output["statistics"]["totalNotSoldItems"] == 1


def test_main_text_output(capsys):
    assert main([SAMPLE, "--month", "November"]) == 0
    out = capsys.readouterr().out
    assert "TRANSACTIONS SUMMARY: NOVEMBER" in out
    assert "electronics: 1" in out


def test_main_invalid_month(capsys):
    assert main([SAMPLE, "--month", "Foo"]) == 2
    assert "Invalid month name. Use full month name." in capsys.readouterr().err


def test_main_missing_file(capsys):
    assert main(["does-not-exist.json", "--month", "March"]) == 1


@pytest.mark.parametrize("content", [
    "{not json",
    json.dumps({"message": "no records"}),
    json.dumps([{"id": 1, "title": "no price"}]),
])
def test_main_invalid_dataset(tmp_path, capsys, content):
    dataset = tmp_path / "dataset.json"
    dataset.write_text(content)
    assert main([str(dataset), "--month", "March"]) == 3
    assert "invalid dataset" in capsys.readouterr().err
