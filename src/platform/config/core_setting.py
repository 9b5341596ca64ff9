from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Seating Core'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    LOG_TO_FILE: bool = False  # Rotating file sink under logs/

    # Seat rules
    SEAT_ADJACENCY_DISTANCE_THRESHOLD: float = 10.0  # Percentage-coordinate distance
    DEFAULT_SEAT_CATEGORY: str = 'General'
    DEFAULT_CATEGORY_COLOR: str = '#6B7280'

    # Canvas geometry
    SEAT_HIT_TOLERANCE: float = 3.0  # Percentage-coordinate radius for pointer hits
    MIN_CANVAS_ZOOM: float = 0.1  # Floor applied before dividing by zoom
    COORDINATE_GRID_SIZE: float = 1.0

    @field_validator('SEAT_ADJACENCY_DISTANCE_THRESHOLD', 'SEAT_HIT_TOLERANCE', 'MIN_CANVAS_ZOOM')
    @classmethod
    def ensure_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError('must be positive')
        return v


settings = Settings()  # type: ignore
