from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Required from environment (.env / deployment secrets)
    database_url: str
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 24 * 7  # 7 days
    app_env: str = "development"  # development, staging, production

    # CORS origins as comma-separated values
    # Example: "https://jobs.example.com,https://admin.example.com"
    cors_allow_origins: str = "http://localhost:3000"

    host: str = "0.0.0.0"
    port: int = 5000

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # Browser session cookie; mirrored into the Authorization header on API calls
    auth_cookie_name: str = "auth-token"
    auth_cookie_secure: bool = False
    auth_cookie_samesite: str = "lax"

    # List endpoints
    default_page_size: int = 10

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
