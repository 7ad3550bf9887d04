import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Application settings
    app_name: str = os.getenv("APP_NAME", "Library Catalog")
    default_patron_name: str = os.getenv("DEFAULT_PATRON_NAME", "Guest")

    # Logging settings
    log_level: str = os.getenv("LOG_LEVEL", "WARNING").upper()


settings = Settings()
