from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "", "case_sensitive": False}

    # App
    environment: str = "development"
    debug: bool = True
    app_name: str = "SolarCalc"
    version: str = "0.1.0"
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Logging
    log_json: bool = False

    # Peak sun hours slider (h/day)
    peak_sun_hours_min: float = 3.0
    peak_sun_hours_max: float = 8.0
    peak_sun_hours_step: float = 0.1
    peak_sun_hours_default: float = 5.5

    # System efficiency slider (fraction)
    efficiency_min: float = 0.70
    efficiency_max: float = 0.95
    efficiency_step: float = 0.01
    efficiency_default: float = 0.85

    @property
    def cors_origin_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()
