"""Chat generation route."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from project_engine.api.deps import Generator, Store
from project_engine.models import FileSet, Message

router = APIRouter()


class GenerateRequest(BaseModel):
    """A chat prompt for the open project."""

    prompt: str = Field(min_length=1)


class GenerateResponse(BaseModel):
    """The chat turn produced by a prompt."""

    success: bool
    messages: list[Message]  # The user turn followed by the assistant reply
    files: FileSet
    project_id: str | None = None
    version_id: str | None = None


@router.post("/generate", response_model=GenerateResponse)
async def generate(request: GenerateRequest, store: Store, generator: Generator) -> GenerateResponse:
    """Generate or modify the open project's website from a prompt.

    Failures are reported as an assistant message, not an HTTP error.
    """
    prompt = request.prompt.strip()
    if not prompt:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Prompt cannot be empty",
        )

    user_message = Message(role="user", content=prompt)
    outcome = await generator.handle_prompt(store, prompt)
    assistant_message = Message(
        role="assistant",
        content=outcome.message,
        files=outcome.files if outcome.version else None,
        image_url=outcome.image_url,
    )

    project = store.current_project
    return GenerateResponse(
        success=outcome.success,
        messages=[user_message, assistant_message],
        files=outcome.files,
        project_id=project.id if project else None,
        version_id=outcome.version.id if outcome.version else None,
    )
