"""Configuration settings for the BuildGate system."""

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import Field

# Load .env into os.environ so provider SDKs pick up their standard key vars
load_dotenv()


class Settings(BaseSettings):
    """Global settings for BuildGate.

    Settings can be overridden via environment variables with BUILDGATE_ prefix.
    Example: BUILDGATE_MAX_RETRIES=1
    """

    # Provider / model
    default_provider: str = Field(
        default="anthropic",
        description="Provider used when none is given (anthropic, openai, deepseek, litellm, mock)"
    )
    default_model: str = Field(
        default="claude-sonnet-4-20250514",
        description="Default model for generation calls"
    )
    max_tokens_per_call: int = Field(
        default=8192,
        description="Maximum tokens per individual generation call"
    )

    # Retry loop
    max_retries: int = Field(
        default=2,
        ge=0,
        description="Content-quality retries after the first attempt (2 => 3 generation calls)"
    )
    quality_pass_score: int = Field(
        default=80,
        ge=0,
        le=100,
        description="Minimum overall quality score accepted without a retry"
    )

    # API settings (env: BUILDGATE_<KEY> or standard env var)
    anthropic_api_key: str = Field(
        default="",
        description="Anthropic API key (env: BUILDGATE_ANTHROPIC_API_KEY)",
    )
    openai_api_key: str = Field(
        default="",
        description="OpenAI API key (env: BUILDGATE_OPENAI_API_KEY)",
    )
    deepseek_api_key: str = Field(
        default="",
        description="Deepseek API key (env: BUILDGATE_DEEPSEEK_API_KEY)",
    )
    api_timeout_seconds: int = Field(
        default=120,
        description="API call timeout in seconds"
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level for the CLI"
    )

    model_config = {
        "env_prefix": "BUILDGATE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",  # ignore extra env vars (e.g. OPENAI_API_KEY) not in schema
    }

    @property
    def max_attempts(self) -> int:
        """Total generation calls a run may make."""
        return self.max_retries + 1


# Create singleton instance
settings = Settings()
