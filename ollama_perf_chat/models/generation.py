from pydantic import BaseModel, Field, field_validator


class GenerationParams(BaseModel):
    """
    Parameters sent with every completion request.

    Sampling parameters are left to the server's defaults.
    """
    model: str = Field(..., description="Model identifier as known to Ollama")

    @field_validator('model')
    def validate_model(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("model must not be empty")
        return v


class ModelConfig(BaseModel):
    """Model catalogue entry shown in the selection menu."""
    name: str
    description: str = ""
