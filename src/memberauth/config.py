from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str  # e.g. mongodb://localhost:27017/memberauth, database name taken from the path
    host: str = "127.0.0.1"
    port: int = 3000
    debug: bool = False
    cors_origins: list[str] = []
    cookie_secure: bool = False  # Set to True in production with HTTPS
    bcrypt_rounds: int = 10
    member_images: list[str] = ["cat1.jpg", "cat2.jpg", "cat3.jpg"]

    model_config = {
        "env_file": [".env"],
        "env_prefix": "MEMBERAUTH_",
        "extra": "ignore",
    }
