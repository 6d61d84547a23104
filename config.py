import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./accounts.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 9000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    SESSION_TTL_HOURS = int(data.get("SESSION_TTL_HOURS", 24))
    RESET_TOKEN_TTL_MINUTES = int(data.get("RESET_TOKEN_TTL_MINUTES", 30))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    COOKIE_SECURE = bool(data.get("COOKIE_SECURE", True))
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:3000")
    EMAIL_HOST = data.get("EMAIL_HOST", "localhost")
    EMAIL_PORT = int(data.get("EMAIL_PORT", 587))
    EMAIL_USER = data.get("EMAIL_USER", "")
    EMAIL_PASSWORD = data.get("EMAIL_PASSWORD", "")
