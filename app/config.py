"""Configuration settings for the seed catalog backend."""

from typing import List, Optional
from pathlib import Path
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings."""

    # Application
    app_name: str = Field(default="Savaj Seeds")
    debug: bool = Field(default=False)
    app_env: str = Field(default="development")

    # Database
    database_url: str = Field(default="sqlite:///./seeds.db")

    # Admin sessions
    session_cookie_name: str = Field(default="seeds_session")
    session_expire_minutes: int = Field(default=60 * 24)
    session_cookie_secure: bool = Field(default=False)

    # Catalog
    catalog_source: str = Field(default="database")  # "database" or "spreadsheet"
    catalog_spreadsheet_path: Path = Field(default=Path("./data/products.xlsx"))
    articles_path: Path = Field(default=Path("./data/articles.json"))
    search_results_per_page: int = Field(default=10, gt=0)

    # CORS
    cors_origins: List[str] = Field(
        default=[
            "http://localhost:3000",  # Next.js dev server
            "http://127.0.0.1:3000",
        ]
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default="app.log")

    # Email (contact form confirmations)
    smtp_host: Optional[str] = Field(default=None)
    smtp_port: int = Field(default=587)
    smtp_user: Optional[str] = Field(default=None)
    smtp_password: Optional[str] = Field(default=None)
    from_email: str = Field(default="noreply@savajseeds.com")
    from_name: str = Field(default="Savaj Seeds")
    enable_email_notifications: bool = Field(default=False)

    # Rate limiting
    rate_limit_enabled: bool = Field(default=True)

    # First-run seeding
    admin_email: Optional[str] = Field(default=None)
    admin_password: Optional[str] = Field(default=None)
    seed_sample_products: bool = Field(default=True)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Create global settings instance
settings = Settings()
