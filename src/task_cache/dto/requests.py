"""Request DTOs for API endpoints."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class TaskPayload(BaseModel):
    """Body of POST /tasks and PUT /tasks/{id}.

    Types are checked strictly: a number where a string belongs, or a
    string where a boolean belongs, is rejected rather than coerced.
    The text field is accepted as either "name" or "title".
    """

    model_config = ConfigDict(strict=True, extra="ignore")

    id: int | str | None = Field(None, description="Task identifier (client policy only)")
    name: str = Field(
        "",
        validation_alias=AliasChoices("name", "title"),
        description="Free text describing the task",
    )
    completed: bool = Field(False, description="Whether the task is done")
