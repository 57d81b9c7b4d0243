from typing import Annotated, Literal

from pydantic import Field

# Store-assigned ids, only the shape is checked at the API boundary
RecordId = Annotated[str, Field(pattern=r"^[0-9a-f]{32}$")]

ExteriorType = Literal["splat", "video"]
PhotoCategory = Literal["plumbing", "electrical", "framing", "general"]
AssignmentRole = Literal["operator", "client"]
SortOrder = Literal["asc", "desc"]
