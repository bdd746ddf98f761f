from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_name: str = "uml-spring-generator"
    api_host: str = "0.0.0.0"
    api_port: int = 8080

    database_url: str
    redis_url: str

    exports_dir: str = "/data/exports"

    # Defaults for generated projects
    default_package_name: str = "com.example"
    default_project_name: str = "spring-boot-project"
    spring_boot_version: str = "3.2.0"
    java_version: str = "17"
    generated_base_url: str = "http://localhost:8080"

settings = Settings()
