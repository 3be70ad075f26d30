from typing import Annotated
from pydantic import BaseModel, ConfigDict, StringConstraints
from pydantic.alias_generators import to_camel

# Trimmed, non-blank names shared by exercises, plans and logs
NameStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=2000)]

class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python; snake_case input is accepted too."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

def reject_null(v, field: str):
    # For partial updates: omitted means "leave alone", explicit null is an error
    if v is None:
        raise ValueError(f"{field} cannot be null")
    return v
