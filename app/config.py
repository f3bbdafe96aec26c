from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()

class Settings(BaseSettings):
    DATABASE_URL: str
    SECRET_KEY: str
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24 * 7  # 7 days
    ENV: str = "local"  # Environment setting

    # Frontend origin allowed by CORS
    CLIENT_URL: str = "http://localhost:5173"

    # Used when converting estimated hours into days
    HOURS_PER_DAY: int = 8

    model_config = {
        "env_file": ".env",
        "extra": "ignore",
    }

settings = Settings()
