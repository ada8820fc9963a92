import json

import pytest

from cspe.config.scraper import SAMPLE_SET_CODES_PATH, ScraperConfig
from cspe.scrape.errors import SetCodeError
from cspe.scrape.set.set_codes import load_set_codes, resolve_set_code


def test_resolves_mapped_name(set_codes):
    assert resolve_set_code("Alpha Edition", set_codes) == "ALP"
    assert resolve_set_code("Beta Edition", set_codes) == "BET"


def test_unmapped_name_raises_with_set_name(set_codes):
    with pytest.raises(SetCodeError) as exc:
        resolve_set_code("Gamma Edition", set_codes)

    assert exc.value.set_name == "Gamma Edition"
    assert str(exc.value) == "Set code was not defined in JSON mapper for Gamma Edition"


def test_empty_code_counts_as_unmapped():
    with pytest.raises(SetCodeError):
        resolve_set_code("Placeholder", {"Placeholder": ""})


def test_lookup_is_exact_match(set_codes):
    with pytest.raises(SetCodeError):
        resolve_set_code("alpha edition", set_codes)


def test_load_set_codes_is_read_only(tmp_path):
    path = tmp_path / "setcodes.json"
    path.write_text(json.dumps({"Alpha Edition": "ALP"}), encoding="utf-8")

    table = load_set_codes(path)

    assert table["Alpha Edition"] == "ALP"
    with pytest.raises(TypeError):
        table["Beta Edition"] = "BET"


def test_load_set_codes_rejects_non_object(tmp_path):
    path = tmp_path / "setcodes.json"
    path.write_text(json.dumps(["ALP"]), encoding="utf-8")

    with pytest.raises(ValueError, match="JSON object"):
        load_set_codes(path)


def test_sample_table_loads():
    table = load_set_codes(SAMPLE_SET_CODES_PATH)
    assert table["Dominaria"] == "DOM"


def test_sample_table_is_the_default(monkeypatch):
    monkeypatch.delenv("CSPE_SET_CODES", raising=False)
    assert ScraperConfig().set_codes_path == SAMPLE_SET_CODES_PATH


def test_set_codes_path_from_env(monkeypatch, tmp_path):
    path = tmp_path / "cardsphere-setcodes.json"
    path.write_text(json.dumps({"Alpha Edition": "ALP"}), encoding="utf-8")
    monkeypatch.setenv("CSPE_SET_CODES", str(path))

    cfg = ScraperConfig()

    assert cfg.set_codes_path == path
    assert resolve_set_code("Alpha Edition", load_set_codes(cfg.set_codes_path)) == "ALP"
