from datetime import datetime

from pydantic import BaseModel, ConfigDict


# The only fields a client may set. Anything else on the input is dropped.
class AirplaneCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    description: str | None = None


class AirplaneOut(BaseModel):
    id: int
    name: str
    description: str | None
    created_at: datetime

    class Config:
        # from_attributes=True lets FastAPI convert a SQLAlchemy object -> this Pydantic schema
        from_attributes = True
