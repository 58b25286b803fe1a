"""Tests for configuration adapter."""

from pathlib import Path

import pytest

from veloroute.adapters.config import AppConfig


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run each test without a .env file or VELOROUTE-relevant variables."""
    monkeypatch.chdir(tmp_path)
    for name in ("MAPBOX_API_KEY", "ROUTE_BUDGET_MINUTES", "MAX_BUDGET_MINUTES", "MERGE_PRECISION"):
        monkeypatch.delenv(name, raising=False)


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.mapbox_api_key == ""
    assert config.route_budget_minutes == 30
    assert config.max_budget_minutes == 60
    assert config.merge_precision == 3
    assert config.revalidate_on_remove is False
    assert config.isochrone_contours == [10, 20, 30]
    assert config.publibike_stations_url == "https://rest.publibike.ch/v1/public/stations"
    assert config.station_refresh_interval_seconds == 300


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("MAPBOX_API_KEY", "pk.secret")
    monkeypatch.setenv("ROUTE_BUDGET_MINUTES", "20")
    monkeypatch.setenv("REVALIDATE_ON_REMOVE", "true")

    config = AppConfig()

    assert config.mapbox_api_key == "pk.secret"
    assert config.route_budget_minutes == 20
    assert config.revalidate_on_remove is True


def test_config_loads_from_dotenv(tmp_path: Path) -> None:
    """Given a .env file, when loading config, then its values are used."""
    (tmp_path / ".env").write_text("MAPBOX_API_KEY=pk.fromfile\n", encoding="utf-8")

    assert AppConfig().mapbox_api_key == "pk.fromfile"


def test_route_budget_above_cap_is_rejected() -> None:
    """Given a route budget above the search cap, when loading, then validation fails."""
    with pytest.raises(ValueError, match="route_budget_minutes"):
        AppConfig(route_budget_minutes=45, max_budget_minutes=40)


def test_max_budget_out_of_range_is_rejected() -> None:
    """Given a cap above 60, when loading, then validation fails."""
    with pytest.raises(ValueError, match="max_budget_minutes must be between"):
        AppConfig(max_budget_minutes=90)


def test_too_many_contours_are_rejected() -> None:
    """Given five contours, when loading, then validation fails."""
    with pytest.raises(ValueError, match="isochrone_contours"):
        AppConfig(isochrone_contours=[5, 10, 15, 20, 25])


def test_toml_sections_override_settings(tmp_path: Path) -> None:
    """Given a TOML file, when loading it, then its sections override settings."""
    config_path = tmp_path / "veloroute.toml"
    config_path.write_text(
        """
[route]
route_budget_minutes = 25
revalidate_on_remove = true

[mapbox]
isochrone_contours = [15, 5]

[stations]
partner_stations_url = "https://example.test/partner.json"
merge_precision = 4
""",
        encoding="utf-8",
    )
    config = AppConfig(config_file=str(config_path))

    data = config.load_toml()

    assert "route" in data
    assert config.route_budget_minutes == 25
    assert config.revalidate_on_remove is True
    assert config.isochrone_contours == [5, 15]
    assert config.partner_stations_url == "https://example.test/partner.json"
    assert config.merge_precision == 4


def test_toml_invalid_value_is_rejected(tmp_path: Path) -> None:
    """Given an invalid TOML value, when loading it, then validation fails."""
    config_path = tmp_path / "veloroute.toml"
    config_path.write_text("[route]\nroute_budget_minutes = 0\n", encoding="utf-8")
    config = AppConfig(config_file=str(config_path))

    with pytest.raises(ValueError, match="route_budget_minutes"):
        config.load_toml()


def test_missing_toml_file_raises(tmp_path: Path) -> None:
    """Given a config file that does not exist, when loading it, then FileNotFoundError is raised."""
    config = AppConfig(config_file=str(tmp_path / "missing.toml"))

    with pytest.raises(FileNotFoundError):
        config.load_toml()


def test_no_toml_file_returns_empty() -> None:
    """Given no config file, when loading TOML, then nothing is applied."""
    assert AppConfig().load_toml() == {}
