# client_parser/config.py

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # HTTP service
    host: str = "0.0.0.0"
    port: int = 5000
    log_level: str = "INFO"

    # Longer user agents are truncated before classification
    max_user_agent_length: int = 2048

    # Memoised classification (entries kept in-process)
    cache_max_entries: int = 10000

    # Batch detection
    samples_path: str = "data/sample_user_agents.json"
    output_path: str = "data/detected_device_info.json"

    class Config:
        env_file = ".env"
        env_prefix = "CLIENT_PARSER_"


settings = Settings()
