"""
RobotikHub Portal Configuration
"""
import os
from functools import lru_cache
from dotenv import load_dotenv

# Load .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables"""

    def __init__(self):
        # Database
        self.db_host: str = os.getenv("DB_HOST", "localhost")
        self.db_port: int = int(os.getenv("DB_PORT", "3306"))
        self.db_user: str = os.getenv("DB_USER", "root")
        self.db_password: str = os.getenv("DB_PASSWORD", "")
        self.db_name: str = os.getenv("DB_NAME", "robotikhub")
        self.database_url_override: str = os.getenv("DATABASE_URL", "")

        # Auth
        self.jwt_secret: str = os.getenv("JWT_SECRET", "robotikhub-secret-change-in-production")
        self.jwt_algorithm: str = "HS256"
        self.access_token_expire_days: int = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "7"))
        self.max_admins: int = 3

        # Server
        self.port: int = int(os.getenv("PORT", "4000"))
        self.api_base_url: str = os.getenv("API_BASE_URL", f"http://localhost:{self.port}")

        # Uploads
        base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        self.upload_dir: str = os.getenv("UPLOAD_DIR", os.path.join(base_dir, "uploads-robotikhub"))
        self.max_upload_size: int = int(os.getenv("MAX_UPLOAD_SIZE", str(10 * 1024 * 1024)))

        # App
        self.app_env: str = os.getenv("APP_ENV", "development")
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO")

    @property
    def database_url(self) -> str:
        """Generate database connection URL"""
        if self.database_url_override:
            return self.database_url_override
        return f"mysql+pymysql://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
