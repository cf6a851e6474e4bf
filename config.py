from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "SnakeCase Demo API"
    debug: bool = False
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3005
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # Reported as "instance" in validation error bodies
    problem_instance: str = "CT Portal"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
