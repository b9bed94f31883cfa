from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase keys (organizerId, startDate, ...)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WebinarCreateRequest(CamelModel):
    id: str = Field(min_length=1)
    title: str
    seats: int
    start_date: datetime
    end_date: datetime
    organizer_id: str = Field(min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 'webinar-001',
                'title': 'Intro to async SQLAlchemy',
                'seats': 50,
                'startDate': '2024-01-01T10:00:00Z',
                'endDate': '2024-01-01T11:00:00Z',
                'organizerId': 'alice',
            }
        }
    )


class WebinarCreatedResponse(CamelModel):
    id: str


class SeatsChangeRequest(CamelModel):
    # Lax mode also accepts numeric strings such as "30"
    seats: int

    model_config = ConfigDict(json_schema_extra={'example': {'seats': 200}})


class MessageResponse(CamelModel):
    message: str


class WebinarResponse(CamelModel):
    id: str
    organizer_id: str
    title: str
    start_date: datetime
    end_date: datetime
    seats: int
