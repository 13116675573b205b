from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Logging Configuration
    log_dir: str = "logs"
    log_level: str = "INFO"
    log_to_file: bool = True

    # Loader Configuration
    strict: bool = False  # Abort on the first rejected line instead of skipping it
    jsonl_pattern: str = "*.jsonl"

    # Graph Configuration
    node_color: str = "#35D068"
    link_color: str = "#35D068"

    model_config = SettingsConfigDict(env_prefix="SEG_VIEWER_", env_file=".env", env_file_encoding="utf-8")

settings = Settings()
