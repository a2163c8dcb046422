import json

from dynasty.config.settings import AppSettings, PartyConfig, load_settings
from dynasty.engine.league import DynastyLeague
from dynasty.models.enums import Party
from dynasty.normalization.normalizer import Normalizer


def test_defaults_are_the_mac_rivalry():
    config = AppSettings()
    assert config.primary_a.name == "Akron"
    assert config.primary_b.name == "Kent State"
    assert "golden flashes" in config.primary_b.aliases


def test_log_level_is_normalized(monkeypatch):
    monkeypatch.setenv("DYNASTY_LOG_LEVEL", "debug")
    assert load_settings().log_level == "DEBUG"


def test_invalid_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("DYNASTY_LOG_LEVEL", "chatty")
    assert load_settings().log_level == "INFO"


def test_primary_parties_from_environment(monkeypatch):
    monkeypatch.setenv(
        "DYNASTY_PRIMARY_A",
        json.dumps({"name": "Ohio", "aliases": ["Bobcats"], "division": "MAC East"}),
    )
    league = DynastyLeague(AppSettings())
    assert league.normalizer.resolve("bobcats").party is Party.PRIMARY_A
    assert league.normalizer.resolve("akron").party is Party.OTHER
    outcome = league.report_result("bobcats", 30, "kent", 10)
    assert outcome.winner == "Ohio"
    assert outcome.rivalry_game


def test_aliases_are_lowercased():
    profile = PartyConfig(name="Miami", aliases=["RedHawks", "  Miami  OH "])
    assert profile.aliases == ["redhawks", "miami oh"]


def test_shared_alias_belongs_to_first_primary():
    config = AppSettings(
        primary_a=PartyConfig(name="Akron", aliases=["akron", "mac"], division="MAC East"),
        primary_b=PartyConfig(name="Kent State", aliases=["kent", "mac"], division="MAC West"),
    )
    normalizer = Normalizer(config)
    assert normalizer.resolve("mac").party is Party.PRIMARY_A
    assert normalizer.normalize("MAC") == "Akron"
    assert normalizer.resolve("kent").party is Party.PRIMARY_B


def test_other_primary_name_as_alias_stays_idempotent():
    config = AppSettings(
        primary_a=PartyConfig(name="Akron", aliases=["zips"], division="MAC East"),
        primary_b=PartyConfig(name="Kent State", aliases=["kent", "akron"], division="MAC West"),
    )
    normalizer = Normalizer(config)
    for raw in ("akron", "Akron", "kent", "zips"):
        once = normalizer.normalize(raw)
        assert normalizer.normalize(once) == once
    assert normalizer.resolve("akron").party is Party.PRIMARY_A
