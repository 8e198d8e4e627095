"""
Tests for the application entry point.
"""

import json
import logging
import sys
import pytest
from datetime import date
from unittest.mock import Mock

from src.vineyard_etc.main import VineyardETcApp, main
from src.vineyard_etc.core.exceptions import WeatherServiceError
from src.vineyard_etc.models import ProviderDay, GrowthStage


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    for var in ("WEATHER_API_BASE_URL", "FARM_LATITUDE", "FARM_LONGITUDE",
                "FARM_ELEVATION", "FARM_TIMEZONE", "ENVIRONMENT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    path = tmp_path / "config.json"
    path.write_text(json.dumps({
        "weather": {"base_url": "https://api.open-meteo.com/v1"},
        "farm": {
            "latitude": 19.1,
            "longitude": 74.7,
            "elevation": 500,
            "timezone": "Asia/Kolkata",
            "planting_date": "2018-06-01",
        },
    }), encoding="utf-8")
    return str(path)


@pytest.fixture
def app(config_file):
    app = VineyardETcApp(config_file=config_file, logger=Mock())
    app.weather_service = Mock()
    return app


class TestVineyardETcApp:
    """Test cases for VineyardETcApp."""

    def test_calculate_for_date(self, app, hot_day):
        app.weather_service.get_weather_for_date.return_value = ProviderDay(
            observation=hot_day, provider_eto=6.8, elevation=512.0, timezone="Asia/Kolkata"
        )

        output = app.calculate_for_date(date(2024, 5, 15))

        location = app.weather_service.get_weather_for_date.call_args[0][0]
        assert location.elevation == 500.0
        assert output["result"]["growthStage"] == "fruit_set"
        assert output["result"]["irrigationRecommendation"]["frequency"] == "daily"
        assert output["weather"]["date"] == "2024-05-15"
        assert output["comparison"]["providerETo"] == 6.8
        assert output["comparison"]["isAccurate"] is True

    def test_stage_override(self, app, hot_day):
        app.weather_service.get_weather_for_date.return_value = ProviderDay(
            observation=hot_day, provider_eto=None
        )

        output = app.calculate_for_date(date(2024, 5, 15), "dormant")

        assert output["result"]["growthStage"] == GrowthStage.DORMANT.value
        assert output["result"]["irrigationRecommendation"]["shouldIrrigate"] is False
        assert output["comparison"] is None

    def test_weather_failure_propagates(self, app):
        app.weather_service.get_weather_for_date.side_effect = WeatherServiceError("down")
        with pytest.raises(WeatherServiceError):
            app.calculate_for_date(date(2024, 5, 15))

    def test_calculate_from_file_without_config(self, fixtures_dir):
        app = VineyardETcApp(config_file="does-not-exist.json", logger=Mock())

        output = app.calculate_from_file(fixtures_dir / "sample_request.json")

        assert output["date"] == "2024-05-15"
        assert output["kc"] == 0.95
        assert output["confidence"] == "high"

    def test_calculate_from_missing_file(self, tmp_path):
        app = VineyardETcApp(logger=Mock())
        with pytest.raises(FileNotFoundError):
            app.calculate_from_file(tmp_path / "nope.json")

    def test_seasonal_plan(self, app):
        plan = app.seasonal_plan()
        assert len(plan) == 7
        assert plan[0]["stage"] == "dormant"
        assert plan[3]["totalETc"] == pytest.approx(228.0)

    def test_components_created_from_config(self, config_file):
        app = VineyardETcApp(config_file=config_file, logger=Mock())
        app.initialize_components()
        assert app.api_client.base_url == "https://api.open-meteo.com/v1"
        assert app.weather_service.api_client is app.api_client
        app.close()
        assert app.api_client is None

    def test_config_log_level_applied(self, config_file, monkeypatch, tmp_path):
        monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "test.log"))
        with open(config_file, encoding="utf-8") as f:
            data = json.load(f)
        data["logging"] = {"level": "WARNING"}
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(data, f)

        app = VineyardETcApp(config_file=config_file)
        assert app.logger.level == logging.INFO
        app.config

        assert app.logger.level == logging.WARNING

    def test_injected_logger_level_untouched(self, config_file, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        logger = logging.getLogger("vineyard_etc.test_injected")
        logger.setLevel(logging.DEBUG)

        app = VineyardETcApp(config_file=config_file, logger=logger)
        app.config

        assert logger.level == logging.DEBUG


class TestMain:
    """Test cases for the command line entry point."""

    def test_request_file(self, fixtures_dir, monkeypatch, capsys, tmp_path):
        monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "test.log"))
        monkeypatch.setattr(
            sys, "argv", ["vineyard-etc", "--request", str(fixtures_dir / "sample_request.json")]
        )

        main()

        output = json.loads(capsys.readouterr().out)
        assert output["growthStage"] == "fruit_set"

    def test_invalid_date(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["vineyard-etc", "--date", "15-05-2024"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1

    def test_missing_config(self, monkeypatch, tmp_path):
        monkeypatch.setenv("LOG_FILE", str(tmp_path / "logs" / "test.log"))
        monkeypatch.setattr(
            sys, "argv", ["vineyard-etc", "--config", str(tmp_path / "absent.json"), "--seasonal"]
        )
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 1
