import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


class Config:
    """configuration class for environment variable"""

    # Logging
    @property
    def LOG_LEVEL(self) -> str:
        return os.getenv('LOG_LEVEL', 'info')

    # Server
    @property
    def HOST(self) -> str:
        return os.getenv('HOST', '0.0.0.0')

    @property
    def PORT(self) -> int:
        return int(os.getenv('PORT', '3000'))

    # Aggregation
    @property
    def REFRESH_INTERVAL_MINUTES(self) -> int:
        return int(os.getenv('REFRESH_INTERVAL_MINUTES', '10'))

    @property
    def REFRESH_INTERVAL(self) -> timedelta:
        return timedelta(minutes=self.REFRESH_INTERVAL_MINUTES)

    @property
    def FETCH_TIMEOUT_SEC(self) -> float:
        return float(os.getenv('FETCH_TIMEOUT_SEC', '10'))

    @property
    def MAX_ITEMS(self) -> int:
        return int(os.getenv('MAX_ITEMS', '200'))

    @property
    def USER_AGENT(self) -> str:
        return os.getenv(
            'USER_AGENT',
            'Mozilla/5.0 (compatible; ChicagoSportsFeed/1.0)',
        )


CONFIG = Config()


__all__ = ["CONFIG", "Config"]
