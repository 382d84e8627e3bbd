from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional

from contact_api.db.mongo import mask_uri


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # MongoDB URI - must be provided via environment variables
    mongo_uri: Optional[str] = None
    mongodb_url: Optional[str] = None  # Alternative environment variable name
    mongo_db_name: Optional[str] = None  # Used when the URI carries no database

    # Outbound mailbox; also the recipient of every notification
    email_user: Optional[str] = None
    email_pass: Optional[str] = None

    smtp_host: str = "smtp.gmail.com"
    smtp_port: int = 587
    smtp_use_tls: bool = True
    smtp_validate_certs: bool = True

    # CORS settings
    allowed_origins: list[str] = ["https://Krutik3008.github.io"]

    log_level: str = "INFO"

    @property
    def effective_mongo_uri(self) -> str:
        """Get the effective MongoDB URI from available sources"""
        uri = self.mongodb_url or self.mongo_uri
        if not uri:
            raise ValueError("MongoDB URI not configured! Please set MONGODB_URL or MONGO_URI in your environment variables.")
        return uri

    @property
    def mailbox(self) -> str:
        """Outbound mailbox address, used as both sender and recipient"""
        if not self.email_user or not self.email_pass:
            raise ValueError("EMAIL_USER and EMAIL_PASS must be set in your environment variables.")
        return self.email_user

    def redacted(self) -> dict:
        """Settings summary that is safe to log"""
        uri = self.mongodb_url or self.mongo_uri
        return {
            "MONGODB_URL": mask_uri(uri) if uri else None,
            "EMAIL_USER": self.email_user,
            "EMAIL_PASS": "[REDACTED]" if self.email_pass else None,
            "SMTP": f"{self.smtp_host}:{self.smtp_port}",
            "ALLOWED_ORIGINS": self.allowed_origins,
        }


@lru_cache
def get_settings():
    return Settings()
