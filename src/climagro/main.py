"""
Main entry point for the climate alert system.

Orchestrates retrieval, summary, anomaly analysis and export for one location.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from .core import Config, setup_logger, LoggerContext, constants
from .api import PowerAPI, GeocodingAPI
from .processing import DataProcessor
from .algorithms import ClimateAlertEngine
from .models import AnalysisResult, ClimateData, ParameterSummary
from .services import ClimateDataFetcher, ExcelExporter, render_alerts, render_summaries


@dataclass
class RunResult:
    """Everything produced by one application run."""

    data: ClimateData
    summaries: Dict[str, ParameterSummary]
    analysis: AnalysisResult
    export_path: Optional[Path] = None


class ClimagroApp:
    """Main application for climate anomaly alerts."""

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize application.

        Args:
            config_file: Path to configuration file
        """
        self.config = Config(config_file)

        self.logger = setup_logger(log_level=self.config.get("logging.level", "INFO"))
        self.logger.info("=" * 60)
        self.logger.info("Climagro Climate Alerts")
        self.logger.info("=" * 60)
        self.logger.info(f"Configuration: {self.config}")

        self.power_api: Optional[PowerAPI] = None
        self.geocoder: Optional[GeocodingAPI] = None
        self.fetcher: Optional[ClimateDataFetcher] = None
        self.processor: Optional[DataProcessor] = None
        self.engine: Optional[ClimateAlertEngine] = None
        self.exporter: Optional[ExcelExporter] = None

    def initialize_components(self) -> None:
        """Initialize all application components."""
        self.logger.info("Initializing components...")

        self.power_api = PowerAPI(
            base_url=self.config.api_base_url,
            community=self.config.api_community,
            user=self.config.api_user,
            timeout=self.config.api_timeout,
            max_retries=self.config.api_max_retries,
            logger=self.logger
        )

        self.geocoder = GeocodingAPI(
            base_url=self.config.geocoding_base_url,
            user_agent=self.config.geocoding_user_agent,
            timeout=self.config.api_timeout,
            max_retries=self.config.api_max_retries,
            logger=self.logger
        )

        self.fetcher = ClimateDataFetcher(
            api_client=self.power_api,
            timezone=self.config.timezone,
            data_lag_days=self.config.data_lag_days,
            logger=self.logger
        )

        self.processor = DataProcessor(logger=self.logger)
        self.engine = ClimateAlertEngine(thresholds=self.config.thresholds, logger=self.logger)
        self.exporter = ExcelExporter(logger=self.logger)

        self.logger.info("All components initialized successfully")

    def close(self) -> None:
        for client in (self.power_api, self.geocoder):
            if client:
                client.close()

    def resolve_location(
        self,
        latitude: Optional[float],
        longitude: Optional[float],
        city: Optional[str]
    ) -> tuple:
        """
        Determine coordinates from explicit values or a city name.

        Raises:
            ValueError: If neither is given or the city cannot be found
        """
        if latitude is not None and longitude is not None:
            return latitude, longitude

        if not city:
            raise ValueError("Provide latitude and longitude or a city name")

        with LoggerContext(self.logger, f"geocoding of {city}"):
            location = self.geocoder.get_city_coordinates(city)

        if location is None:
            raise ValueError(f"Could not find coordinates for '{city}'")

        self.logger.info(
            f"Resolved '{city}' to {location.latitude:.4f}, {location.longitude:.4f} "
            f"({location.address})"
        )
        return location.latitude, location.longitude

    def run(
        self,
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
        city: Optional[str] = None,
        start_date: Optional[str] = None,
        end_date: Optional[str] = None,
        parameters: Optional[List[str]] = None,
        export: bool = False
    ) -> RunResult:
        """
        Fetch, summarize and analyze climate data for one location.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees
            city: City name, used when coordinates are not given
            start_date: First day (YYYY-MM-DD). Default from configuration
            end_date: Last day (YYYY-MM-DD). Default: latest available day
            parameters: Parameter codes. Default from configuration
            export: Write an Excel workbook to the export directory

        Returns:
            RunResult with data, summaries, alerts and the export path
        """
        try:
            self.initialize_components()

            lat, lon = self.resolve_location(latitude, longitude, city)
            parameters = parameters or self.config.default_parameters
            start_date = start_date or self.config.get("processing.start_date", constants.DEFAULT_START_DATE)
            end_date = end_date or self.fetcher.latest_available_date().isoformat()

            with LoggerContext(self.logger, "climate data fetch"):
                data = self.fetcher.fetch(lat, lon, parameters, start_date, end_date)

            summaries = self.processor.summarize(data.dataset, data.parameters)

            with LoggerContext(self.logger, "climate anomaly analysis"):
                analysis = self.engine.analyze(data.dataset)

            export_path = None
            if export:
                with LoggerContext(self.logger, "spreadsheet export"):
                    export_path = self.exporter.export(
                        data, self.config.export_directory, result=analysis
                    )

            self.logger.info("Processing complete")
            return RunResult(data, summaries, analysis, export_path)

        except Exception as e:
            self.logger.error(f"Application error: {e}", exc_info=True)
            raise

        finally:
            self.close()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Climate anomaly alerts for coffee farming (NASA POWER data)"
    )
    parser.add_argument("--config", type=str, default=None, help="Path to configuration file")
    parser.add_argument("--lat", type=float, default=None, help="Latitude (-90 to 90)")
    parser.add_argument("--lon", type=float, default=None, help="Longitude (-180 to 180)")
    parser.add_argument("--city", type=str, default=None, help="City name to geocode")
    parser.add_argument("--start", type=str, default=None, help="Start date (YYYY-MM-DD)")
    parser.add_argument(
        "--end", type=str, default=None,
        help="End date (YYYY-MM-DD). Default: latest available day"
    )
    parser.add_argument(
        "--parameters", type=str, default=None,
        help="Comma-separated parameter codes (e.g. T2M,PRECTOTCORR)"
    )
    parser.add_argument("--export", action="store_true", help="Export data to Excel")

    args = parser.parse_args()

    parameters = None
    if args.parameters:
        parameters = [code.strip().upper() for code in args.parameters.split(",") if code.strip()]

    try:
        app = ClimagroApp(config_file=args.config)
        result = app.run(
            latitude=args.lat,
            longitude=args.lon,
            city=args.city,
            start_date=args.start,
            end_date=args.end,
            parameters=parameters,
            export=args.export,
        )
    except Exception as e:
        print(f"Application failed: {e}")
        sys.exit(1)

    print(render_summaries(result.data, result.summaries))
    print()
    print(render_alerts(result.analysis))
    if result.export_path:
        print()
        print(f"Exported to {result.export_path}")


if __name__ == "__main__":
    main()
