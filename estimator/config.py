from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "Wall Panel Estimator"
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # Panel count conversion: LF / panel length, over-counted for bracing + manufacture
    DEFAULT_PANEL_LEN_FT: float = 8.0
    PANEL_OVERCOUNT: float = 1.1

    # Loose materials
    BAND_HEIGHT_FT: float = 4.0          # panel band sheathing strip
    SHEETS_PER_TAPE_ROLL: float = 6.0    # ZIP flashing tape coverage

    # Temporary bracing: 2x4x16 pieces per panel, spread across levels
    BRACING_PIECES_PER_PANEL: float = 3.0

    class Config:
        env_file = ".env"


settings = Settings()
