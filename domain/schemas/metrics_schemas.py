from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MetricsResponse(BaseModel):
    """Diet metrics for one user, serialized with camelCase keys"""

    total_meals: int = Field(..., ge=0)
    in_diet_meals: int = Field(..., ge=0)
    not_in_diet_meals: int = Field(..., ge=0)
    days_in_sequence: int = Field(..., ge=0)

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True
    )
