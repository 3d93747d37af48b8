import os
from dotenv import load_dotenv
from sqlalchemy.engine import URL

load_dotenv()


def _database_url() -> str | URL:
    url = os.getenv('DATABASE_URL')
    if url:
        return url

    host = os.getenv('DB_HOST')
    if not host:
        return 'sqlite:///./concerts.db'

    return URL.create(
        'oracle+oracledb',
        username=os.getenv('DB_USER'),
        password=os.getenv('DB_PASSWORD'),
        host=host,
        port=int(os.getenv('DB_PORT', '1521')),
        query={'service_name': os.getenv('DB_SERVICE_NAME', 'xe')},
    )


class Settings():
    DATABASE_URL: str | URL = _database_url()
    HOST: str = os.getenv('HOST', '127.0.0.1')
    PORT: int = int(os.getenv('PORT', '3000'))
    APP_ENV: str = os.getenv('APP_ENV', 'development')
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOKI_URL: str | None = os.getenv('LOKI_URL')
    BCRYPT_ROUNDS: int = int(os.getenv('BCRYPT_ROUNDS', '12'))
    ADMIN_USERNAME: str | None = os.getenv('ADMIN_USERNAME')
    ADMIN_PASSWORD: str | None = os.getenv('ADMIN_PASSWORD')

settings = Settings()
