from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Meta-command grammar
    META_COMMAND_MARKER: str = "!"

    # Transcript rendering
    COMPACT_SEPARATOR: str = " -> "
    INDENT_WIDTH: int = 2

    # Ask "Accept value?" after a complete build
    CONFIRM_VALUE: bool = True

    # Console
    LOG_LEVEL: str = "WARNING"
    HISTORY_LENGTH: int = 500

    # Loads from a .env file in the root directory
    model_config = SettingsConfigDict(env_prefix="INTERVIEW_", env_file=".env", extra="ignore")

# Singleton instance
settings = Settings()
