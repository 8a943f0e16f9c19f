import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.environ.get("VIDEOGEN_AUTH_CONFIG", os.path.join(ROOT_PATH, "env.yaml"))

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./videogen_auth.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Tokens
    JWT_ACCESS_SECRET = data.get("JWT_ACCESS_SECRET", "dev-access-secret-change-in-production")
    JWT_REFRESH_SECRET = data.get("JWT_REFRESH_SECRET", "dev-refresh-secret-change-in-production")
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_ISSUER = data.get("JWT_ISSUER", "videogen-api")
    JWT_AUDIENCE = data.get("JWT_AUDIENCE", "videogen-client")
    JWT_ACCESS_TOKEN_TTL_MINUTES = int(data.get("JWT_ACCESS_TOKEN_TTL_MINUTES", 7 * 24 * 60))
    JWT_REFRESH_TOKEN_TTL_MINUTES = int(data.get("JWT_REFRESH_TOKEN_TTL_MINUTES", 30 * 24 * 60))

    # Credentials and one-time codes
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    CODE_TTL_MINUTES = int(data.get("CODE_TTL_MINUTES", 10))

    # Email
    SMTP_HOST = data.get("SMTP_HOST", "")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_TLS = bool(data.get("SMTP_USE_TLS", True))
    SMTP_TIMEOUT_SECONDS = float(data.get("SMTP_TIMEOUT_SECONDS", 10))
    EMAIL_FROM = data.get("EMAIL_FROM", "noreply@videogen.app")
    APP_NAME = data.get("APP_NAME", "AI VideoGen")
    APP_URL = data.get("APP_URL", "http://localhost:5173")
