import enum

from pydantic import BaseModel


class Complexity(str, enum.Enum):
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"
    EXTRA_LARGE = "EXTRA_LARGE"


class ApplyTemplate(BaseModel):
    template_id: int
    complexity: Complexity
