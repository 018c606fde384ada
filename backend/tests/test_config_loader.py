from common import config_loader
from common.config_loader import get_env, get_float_env, get_int_env


def test_get_env_treats_blank_as_unset(monkeypatch):
    monkeypatch.setenv("ODDS_TEST_VALUE", "   ")
    assert get_env("ODDS_TEST_VALUE", "fallback") == "fallback"

    monkeypatch.setenv("ODDS_TEST_VALUE", "  eu ")
    assert get_env("ODDS_TEST_VALUE", "fallback") == "eu"

    monkeypatch.delenv("ODDS_TEST_VALUE", raising=False)
    assert get_env("ODDS_TEST_VALUE") is None


def test_numeric_env_falls_back_on_garbage(monkeypatch):
    monkeypatch.setenv("ODDS_TEST_TIMEOUT", "soon")
    assert get_float_env("ODDS_TEST_TIMEOUT", 15.0) == 15.0
    assert get_int_env("ODDS_TEST_TIMEOUT", 60) == 60

    monkeypatch.setenv("ODDS_TEST_TIMEOUT", "-3")
    assert get_float_env("ODDS_TEST_TIMEOUT", 15.0) == 15.0

    monkeypatch.setenv("ODDS_TEST_TIMEOUT", "10")
    assert get_float_env("ODDS_TEST_TIMEOUT", 15.0) == 10.0
    assert get_int_env("ODDS_TEST_TIMEOUT", 60) == 10


def test_defaults_are_well_formed():
    for csv in (config_loader.ODDS_BOOKMAKERS, config_loader.ODDS_CORE_MARKETS, config_loader.ODDS_PROP_MARKETS):
        assert csv
        assert "" not in csv.split(",")
    assert config_loader.ODDS_API_TIMEOUT > 0
