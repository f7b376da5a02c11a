from pydantic import BaseModel, ConfigDict


class BaseGolfModel(BaseModel):
    """Shared configuration for round and hole records."""
    model_config = ConfigDict(validate_assignment=True)
