"""Team slug normalization."""

import pytest

from valbar.ingestion.polymarket.normalize import TEAM_ABBREVIATIONS, team_to_slug


@pytest.mark.parametrize(
    "name,slug",
    [
        ("100 Thieves", "100t"),
        ("Team Liquid", "tl"),
        ("PAPER REX", "prx"),
        ("G2 Esports", "g2"),
    ],
)
def test_table_hits(name, slug):
    assert team_to_slug(name) == slug


def test_fallback_strips_non_alphanumerics():
    assert team_to_slug("Cloud9") == "cloud9"
    assert team_to_slug("Gen.G Esports") == "gengesports"
    assert team_to_slug("  ") == ""


def test_fallback_keeps_unicode_letters():
    # "KRÜ Esports" is not the table's "kru esports"
    assert team_to_slug("KRÜ Esports") == "krüesports"


def test_table_is_read_only():
    with pytest.raises(TypeError):
        TEAM_ABBREVIATIONS["cloud9"] = "c9"  # type: ignore[index]
