from decimal import Decimal
from typing import Annotated, Optional
from datetime import datetime, timezone
from pydantic import AfterValidator, BaseModel, BeforeValidator, Field, StringConstraints
from tripplanner.utils.time_format import normalize_optional_time

# "9:30 PM" -> "21:30"; blank -> None
TimeStr = Annotated[Optional[str], BeforeValidator(normalize_optional_time)]


def _as_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


# Stored without tzinfo, in UTC
UtcDateTime = Annotated[datetime, AfterValidator(_as_naive_utc)]

CurrencyCode = Annotated[str, StringConstraints(min_length=3, max_length=3, to_upper=True)]

Price = Annotated[Decimal, Field(ge=0, max_digits=10, decimal_places=2)]


class UserBrief(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None

    class Config:
        from_attributes = True
