from pydantic_settings import BaseSettings, SettingsConfigDict


class AppConfig(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='GAMESTORE_')

    APP_TITLE: str = 'Game Store API'
    APP_DESCRIPTION: str = 'In-memory catalog of games'
    APP_VERSION: str = '1.0.0'
    HOST: str = '0.0.0.0'
    PORT: int = 8000
    # The store lives in process memory, so more than one worker means more than one catalog
    WORKERS: int = 1
    LOG_LEVEL: str = 'INFO'
    SEED_DATA: bool = True

settings = AppConfig()
