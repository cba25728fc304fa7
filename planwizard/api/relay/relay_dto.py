from pydantic import BaseModel, Field


class CompletionRequest(BaseModel):
    prompt: str = Field(..., description="Prompt forwarded verbatim as the user message.")


class CompletionResponse(BaseModel):
    success: bool = Field(..., description="Always true for a successful relay.")
    content: str = Field(..., description="First text segment of the model reply.")
