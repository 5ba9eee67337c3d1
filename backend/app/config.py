from pathlib import Path
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    data_dir: Path = Path.home() / "PortfolioDirectory"
    session_ttl_seconds: int = 3600
    api_prefix: str = "/api/v1"
    log_level: str = "INFO"
    # Search page shows five portfolios at a time.
    default_page_size: int = 5
    max_page_size: int = 100
    default_image_url: str = "/static/no-image.png"
    default_description: str = "Welcome to my portfolio"

    @property
    def db_path(self) -> Path:
        return self.data_dir / "db.sqlite"

    model_config = {"env_prefix": "PORTFOLIOS_"}


settings = Settings()
