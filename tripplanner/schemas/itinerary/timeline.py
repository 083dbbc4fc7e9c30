from pydantic import BaseModel
from typing import Optional, List
from datetime import date


class LinkedDocument(BaseModel):
    id: int
    name: str
    file_url: str


class TimelineEvent(BaseModel):
    id: str
    type: str
    entity_id: int
    date: date
    time: Optional[str] = None
    title: str
    subtitle: Optional[str] = None
    price: Optional[float] = None
    currency: Optional[str] = None
    linked_document: Optional[LinkedDocument] = None


class TimelineDay(BaseModel):
    date: date
    day_number: int
    color_index: int
    events: List[TimelineEvent]


class TimelineResponse(BaseModel):
    trip_id: int
    language: str
    days: List[TimelineDay]


class DailyViewResponse(BaseModel):
    trip_id: int
    date: date
    day_number: int
    color_index: int
    color: str
    language: str
    events: List[TimelineEvent]
