from pydantic import BaseModel


class ConceptsRequest(BaseModel):
    text: str | None = None
    fileName: str | None = None


class ChatRequest(BaseModel):
    message: str | None = None
    context: str | None = None
