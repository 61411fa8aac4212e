"""
Structured Logger configuration for League Rankings.

This module provides a centralized logger configuration with structured JSON
logging. Logs are written to stderr so that stdout only carries the ranking
report.
"""

import json
import logging
import sys
from typing import Any

from aws_lambda_powertools import Logger

DEFAULT_LOG_LEVEL = "ERROR"


class LeagueRankingsLogger:
    """
    Centralized logger for League Rankings with structured logging.

    Provides consistent JSON log formatting and helpers for the events of a
    ranking run.
    """

    def __init__(
        self,
        service_name: str = "league-rankings",
        level: str = DEFAULT_LOG_LEVEL,
    ):
        """
        Initialize the logger with service configuration.

        Args:
            service_name: Name of the service for log identification
            level: Initial log level
        """
        self.service_name = service_name

        self._logger = Logger(
            service=service_name,
            level=level,
            use_datetime_directive=True,
            json_serializer=self._custom_serializer,
            logger_handler=logging.StreamHandler(sys.stderr),
        )

    def get_logger(self) -> Logger:
        """
        Get the configured structured Logger instance.

        Returns:
            Configured Logger instance
        """
        return self._logger

    def set_level(self, level: str) -> None:
        self._logger.setLevel(level)

    def log_run_start(self, config: dict[str, Any]) -> None:
        """
        Log the start of a ranking run with configuration details.

        Args:
            config: Run configuration parameters
        """
        self._logger.info(
            "Starting league ranking run",
            extra={
                "operation": "run_start",
                "config": config,
                "service": self.service_name,
            },
        )

    def log_matchday_applied(self, snapshot: Any, match_count: int) -> None:
        """
        Log a matchday that has been applied to the table.

        Args:
            snapshot: Ranking snapshot taken after the matchday
            match_count: Number of matches in the matchday
        """
        self._logger.debug(
            f"Matchday {snapshot.matchday} applied",
            extra={
                "operation": "matchday_applied",
                "matchday": snapshot.matchday,
                "match_count": match_count,
                "snapshot": snapshot,
                "service": self.service_name,
            },
        )

    def log_run_complete(self, summary: dict[str, Any]) -> None:
        """
        Log the completion of a ranking run.

        Args:
            summary: Counts of matchdays, matches and teams processed
        """
        self._logger.info(
            "League ranking run completed",
            extra={
                "operation": "run_complete",
                "summary": summary,
                "service": self.service_name,
            },
        )

    @staticmethod
    def _custom_serializer(obj: Any) -> Any:
        """
        Custom JSON serializer for complex objects including Pydantic models.

        Args:
            obj: Object to serialize

        Returns:
            Serialized JSON string
        """

        def default(value: Any) -> Any:
            if hasattr(value, "model_dump"):
                return value.model_dump(mode="json")
            if hasattr(value, "isoformat"):
                return value.isoformat()
            if hasattr(value, "__dict__"):
                return value.__dict__
            return str(value)

        return json.dumps(obj, default=default, separators=(",", ":"))


# Global logger instance
rankings_logger = LeagueRankingsLogger()


def get_logger() -> Logger:
    """
    Get the global logger instance.

    Returns:
        Configured structured Logger
    """
    return rankings_logger.get_logger()
