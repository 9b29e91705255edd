# tests/test_case_convert.py
"""Tests for case-style conversion and its JSON-backed style table."""

from __future__ import annotations

import json

import pytest

from wordcase.case import convert as CV
from wordcase.utils import ConfigTypeError, log as LOG


# ---------- Fixtures ----------
@pytest.fixture(autouse=True)
def _fresh_styles(monkeypatch):
    """Reset data dir and debug topics between tests."""
    monkeypatch.delenv("WORDCASE_DATA_DIR", raising=False)
    monkeypatch.delenv("WORDCASE_DEBUG_TOPICS", raising=False)
    LOG.reload_topics()


@pytest.fixture
def custom_styles_dir(tmp_path, monkeypatch):
    data = tmp_path / "data"
    data.mkdir()
    monkeypatch.setenv("WORDCASE_DATA_DIR", str(data))
    return data


# ---------- Bundled styles ----------
@pytest.mark.parametrize(
    "style,expected",
    [
        ("snake", "god_matsuri_ahihihi"),
        ("kebab", "god-matsuri-ahihihi"),
        ("camel", "godMatsuriAhihihi"),
        ("pascal", "GodMatsuriAhihihi"),
        ("constant", "GOD_MATSURI_AHIHIHI"),
        ("dot", "god.matsuri.ahihihi"),
        ("path", "god/matsuri/ahihihi"),
        ("title", "God Matsuri Ahihihi"),
        ("sentence", "God matsuri ahihihi"),
    ],
)
def test_convert_case_bundled_styles(style, expected):
    assert CV.convert_case("godMatsuri ahihihi", style) == expected


def test_bundled_table_lists_all_styles():
    assert set(CV.case_styles()) == {
        "snake", "kebab", "camel", "pascal", "constant",
        "dot", "path", "title", "sentence",
    }


def test_shortcuts():
    assert CV.to_snake_case("GodMatsuri") == "god_matsuri"
    assert CV.to_kebab_case("god_matsuri") == "god-matsuri"
    assert CV.to_camel_case("god-matsuri") == "godMatsuri"
    assert CV.to_pascal_case("god.matsuri") == "GodMatsuri"
    assert CV.to_constant_case("godMatsuri") == "GOD_MATSURI"
    assert CV.to_title_case("kami 神様") == "Kami 神様"


def test_convert_case_unicode_words():
    assert CV.to_pascal_case("ßenevolent ōatsuri") == "SSenevolentŌatsuri"
    assert CV.to_snake_case("ÉodMatsuRi") == "éod_matsu_ri"


def test_acronyms_fragment_per_letter():
    assert CV.to_snake_case("HTTPServer") == "h_t_t_p_server"


def test_convert_case_no_words_returns_empty():
    assert CV.convert_case("", "camel") == ""
    assert CV.convert_case("__--..", "pascal") == ""


def test_style_name_is_trimmed_and_case_insensitive():
    assert CV.convert_case("god matsuri", "  Snake ") == "god_matsuri"


def test_unknown_style_raises():
    with pytest.raises(CV.UnknownCaseStyle) as ei:
        CV.convert_case("god matsuri", "wavy")
    assert "snake" in str(ei.value)
    assert isinstance(ei.value, ValueError)


def test_convert_case_accepts_style_mapping():
    style = {"separator": "+", "first_word": "upper", "other_words": "capitalize"}
    assert CV.convert_case("god matsuri ahihihi", style) == "GOD+Matsuri+Ahihihi"


# ---------- Custom style tables ----------
def test_styles_loaded_from_env_data_dir(custom_styles_dir):
    (custom_styles_dir / "case_styles.json").write_text(
        json.dumps({"Shout": {"separator": "!", "first_word": "upper", "other_words": "upper"}}),
        encoding="utf-8",
    )
    assert set(CV.case_styles()) == {"shout"}
    assert CV.convert_case("god matsuri", "shout") == "GOD!MATSURI"


@pytest.mark.parametrize(
    "entry",
    [
        "not-an-object",
        {"first_word": "lower", "other_words": "lower"},
        {"separator": 1, "first_word": "lower", "other_words": "lower"},
        {"separator": "_", "first_word": "title", "other_words": "lower"},
    ],
)
def test_malformed_style_table_raises(custom_styles_dir, entry):
    (custom_styles_dir / "case_styles.json").write_text(
        json.dumps({"bad": entry}), encoding="utf-8"
    )
    with pytest.raises(ConfigTypeError):
        CV.case_styles()


def test_case_styles_returns_a_copy():
    styles = CV.case_styles()
    styles.pop("snake")
    assert "snake" in CV.case_styles()


def test_mutating_returned_styles_does_not_leak():
    CV.case_styles()["snake"]["separator"] = "#"
    CV.get_case_style("snake")["first_word"] = "upper"
    assert CV.to_snake_case("god matsuri") == "god_matsuri"


def test_switching_data_dir_reloads_styles(tmp_path, monkeypatch):
    assert CV.to_snake_case("god matsuri") == "god_matsuri"  # bundled table now in use

    data = tmp_path / "data"
    data.mkdir()
    (data / "case_styles.json").write_text(
        json.dumps({"snake": {"separator": "~", "first_word": "lower", "other_words": "lower"}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("WORDCASE_DATA_DIR", str(data))
    assert CV.to_snake_case("god matsuri") == "god~matsuri"

    monkeypatch.delenv("WORDCASE_DATA_DIR")
    assert CV.to_snake_case("god matsuri") == "god_matsuri"


# ---------- Caller-supplied style mappings ----------
@pytest.mark.parametrize(
    "style",
    [
        {"separator": "_", "first_word": "title", "other_words": "lower"},
        {"separator": "_", "first_word": "lower"},
        {"first_word": "lower", "other_words": "lower"},
        ["_", "lower", "lower"],
    ],
)
def test_malformed_style_mapping_raises(style):
    with pytest.raises(ConfigTypeError):
        CV.convert_case("god matsuri", style)


def test_apply_casing_rejects_unknown_casing():
    with pytest.raises(ConfigTypeError, match="title"):
        CV._apply_casing("god", "title")  # type: ignore[arg-type]


# ---------- Debug topic ----------
def test_convert_case_debug_topic(monkeypatch, capsys):
    monkeypatch.setenv("WORDCASE_DEBUG_TOPICS", "case")
    LOG.reload_topics()
    CV.to_snake_case("GodMatsuri")
    err = capsys.readouterr().err
    assert "[case][DEBUG]" in err
    assert "'god_matsuri'" in err


def test_convert_case_silent_without_topic(capsys):
    CV.to_snake_case("GodMatsuri")
    assert capsys.readouterr().err == ""
