"""
Main entry point for the vineyard ETc system.

Orchestrates weather retrieval, the ETc calculation and the provider ETo
cross-check for the configured farm.
"""

import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .core import Config, setup_logger, set_log_level, LoggerContext, DateUtils, ETcError
from .api import OpenMeteoClient
from .algorithms import ETcCalculator
from .algorithms.crop import to_growth_stage
from .models import CalculationRequest, GrowthStage
from .services import WeatherService, analyze_eto


class VineyardETcApp:
    """Main application for vineyard irrigation planning."""

    def __init__(
        self,
        config_file: Optional[str] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize application.

        The configuration file is only read by operations that need the farm
        settings, so request files can be processed without one.

        Args:
            config_file: Path to configuration file
            logger: Logger instance (defaults to the application logger)
        """
        self.config_file = config_file
        self._config: Optional[Config] = None

        # An injected logger is left as configured by the caller
        self._owns_logger = logger is None
        self.logger = logger or setup_logger()
        self.logger.info("=" * 60)
        self.logger.info("Vineyard ETc Estimation System")
        self.logger.info("=" * 60)

        # Initialized in initialize_components
        self.api_client: Optional[OpenMeteoClient] = None
        self.weather_service: Optional[WeatherService] = None
        self._calculator: Optional[ETcCalculator] = None

    @property
    def config(self) -> Config:
        if self._config is None:
            self._config = Config(self.config_file)
            if self._owns_logger:
                set_log_level(self.logger, self._config.log_level)
            self.logger.info(f"Configuration: {self._config}")
        return self._config

    @property
    def calculator(self) -> ETcCalculator:
        if self._calculator is None:
            timezone = self._config.farm_timezone if self._config else "UTC"
            self._calculator = ETcCalculator(logger=self.logger, timezone=timezone)
        return self._calculator

    def initialize_components(self) -> None:
        """Initialize the weather client and service."""
        if self.weather_service is not None:
            return

        self.logger.info("Initializing components...")
        self.api_client = OpenMeteoClient(
            base_url=self.config.weather_base_url,
            timeout=self.config.weather_timeout,
            max_retries=self.config.weather_max_retries,
            logger=self.logger
        )
        self.weather_service = WeatherService(self.api_client, self.logger)

    def close(self) -> None:
        if self.api_client:
            self.api_client.close()
            self.api_client = None
            self.weather_service = None

    def calculate_for_date(
        self,
        target_date: Optional[date] = None,
        growth_stage: Optional[Union[GrowthStage, str]] = None
    ) -> Dict[str, Any]:
        """
        Calculate ETc and irrigation advice for the configured farm.

        Args:
            target_date: Day to calculate (defaults to today in the farm timezone)
            growth_stage: Growth stage override (defaults to the calendar stage)

        Returns:
            Dictionary with the calculation result, the weather used and the
            comparison against the provider's ETo (None if unavailable)
        """
        config = self.config
        self.initialize_components()

        if target_date is None:
            target_date = DateUtils(self.logger).today(config.farm_timezone)
        location = config.farm_location
        self.logger.info(f"Calculating ETc for {target_date.isoformat()} at {location}")

        with LoggerContext(self.logger, f"weather fetch for {target_date.isoformat()}"):
            provider_day = self.weather_service.get_weather_for_date(location, target_date)

        if growth_stage is None:
            stage = self.calculator.determine_growth_stage(config.planting_date, target_date)
        else:
            stage = to_growth_stage(growth_stage)

        request = CalculationRequest(
            weather=provider_day.observation,
            growth_stage=stage,
            location=location,
            irrigation_method=config.irrigation_method,
            soil_type=config.soil_type,
            farm_id=config.farm_id,
            planting_date=config.planting_date
        )

        with LoggerContext(self.logger, "ETc calculation"):
            result = self.calculator.calculate_etc(request)

        comparison = None
        if provider_day.provider_eto is not None:
            analysis = analyze_eto(result.eto, provider_day)
            self.logger.info(
                f"Provider ETo={analysis.provider_eto:.2f} mm/day, "
                f"difference={analysis.difference:+.2f} ({analysis.percentage_error:+.1f}%)"
            )
            comparison = analysis.to_dict()
        else:
            self.logger.warning(f"Provider ETo missing for {target_date.isoformat()}")

        return {
            "result": result.to_dict(),
            "weather": provider_day.observation.to_dict(),
            "comparison": comparison,
        }

    def calculate_from_file(self, path: Union[str, Path]) -> Dict[str, Any]:
        """
        Calculate ETc for a request stored as JSON.

        Args:
            path: Path to a request in the farm management input format

        Returns:
            Calculation result dictionary
        """
        request_path = Path(path)
        if not request_path.exists():
            raise FileNotFoundError(f"Request file not found: {request_path}")

        with open(request_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        self.logger.info(f"Loaded calculation request from {request_path}")
        return self.calculator.calculate_etc(data).to_dict()

    def seasonal_plan(self) -> List[Dict[str, Any]]:
        """Seasonal water requirement per growth stage for the configured farm."""
        config = self.config
        requirements = self.calculator.calculate_seasonal_requirements(
            config.planting_date, config.farm_location
        )
        return [r.to_dict() for r in requirements]


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Vineyard ETc Estimation System"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration file"
    )
    parser.add_argument(
        "--date",
        type=str,
        default=None,
        help="Target date (YYYY-MM-DD). Default: today in the farm timezone"
    )
    parser.add_argument(
        "--stage",
        type=str,
        default=None,
        choices=[s.value for s in GrowthStage],
        help="Growth stage override. Default: derived from the date"
    )
    parser.add_argument(
        "--request",
        type=str,
        default=None,
        help="Calculate from a request JSON file instead of fetching weather"
    )
    parser.add_argument(
        "--seasonal",
        action="store_true",
        help="Print the seasonal water requirement per growth stage"
    )

    args = parser.parse_args()

    # Parse target date
    target_date = None
    if args.date:
        try:
            target_date = DateUtils.parse_date(args.date)
        except ValueError:
            print(f"Invalid date format: {args.date}. Use YYYY-MM-DD")
            sys.exit(1)

    app = None
    try:
        app = VineyardETcApp(config_file=args.config)
        if args.request:
            output: Any = app.calculate_from_file(args.request)
        elif args.seasonal:
            output = app.seasonal_plan()
        else:
            output = app.calculate_for_date(target_date, args.stage)
    except (ETcError, OSError, ValueError) as e:
        print(f"Application failed: {e}")
        sys.exit(1)
    finally:
        if app:
            app.close()

    print(json.dumps(output, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    main()
