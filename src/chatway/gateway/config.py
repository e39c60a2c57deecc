"""Gateway configuration with environment variable loading.

Pydantic-based configuration for the Groq completion gateway.
Generation parameters are fixed defaults shared by every turn.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class GatewayConfig(BaseModel):
    """Configuration for the completion gateway.

    Attributes:
        api_key: Groq API key, read once when the gateway is built.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        top_p: Nucleus sampling threshold.
        max_tokens: Maximum tokens in a generated reply.
        stop: Optional stop sequence (None disables early stopping).
    """

    api_key: str = Field(
        default_factory=lambda: os.getenv("GROQ_API_KEY") or os.getenv("groqApiKey", ""),
        validate_default=True,
        description="API key for the Groq API",
    )
    temperature: float = Field(
        default=0.6,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    top_p: float = Field(
        default=0.95,
        ge=0.0,
        le=1.0,
        description="Nucleus sampling threshold",
    )
    max_tokens: int = Field(
        default=4096,
        ge=1,
        le=131072,
        description="Maximum tokens in generated response",
    )
    stop: str | None = Field(
        default=None,
        description="Stop sequence, None to generate until max_tokens",
    )

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate that API key is provided and non-empty."""
        if not v or not v.strip():
            raise ValueError("API key required. Set GROQ_API_KEY in .env")
        return v.strip()


def get_gateway_config() -> GatewayConfig:
    """Create gateway configuration from environment.

    Returns:
        Configured GatewayConfig instance.

    Raises:
        ValueError: If no API key is set.
    """
    return GatewayConfig()
