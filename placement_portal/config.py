from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Required from environment (.env / deployment secrets)
    database_url: str
    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60 * 10  # 10 hours
    app_env: str = "development"  # development, staging, production

    # All API routers are mounted under this prefix
    api_prefix: str = "/api"

    # CORS origins as comma-separated values
    # Example: "https://portal.example.edu,https://admin.example.edu"
    cors_allow_origins: str = "http://localhost:5173"

    log_level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR

    # bcrypt work factor; lower only in tests
    bcrypt_rounds: int = 12

    # Resume uploads
    upload_dir: str = "uploads"
    max_resume_upload_mb: int = 5

    # Request guards
    rate_limit_auth_per_min: int = 20

    # Company name stamped on jobs a college posts for itself
    college_posting_company: str = "College Placement Cell"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
