from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AURA_",
        extra="ignore"
    )

    profile_storage_key: str = "auraCalibrationProfile"
    storage_backend: str = "sqlite"  # memory | sqlite | file
    sqlite_path: str = "Storage/auraplay.db"
    storage_dir: str = "Storage/kv"
    event_sink: str = "console"  # none | console | jsonl
    event_log_dir: str = "logs/adaptation"
    api_host: str = "0.0.0.0"
    api_port: int = 8000

settings = Settings()
