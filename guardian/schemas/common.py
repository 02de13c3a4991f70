# guardian/schemas/common.py
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Annotated, Optional

from pydantic import AfterValidator, Field


def to_naive_utc(value: datetime) -> datetime:
    """Stored timestamps are naive UTC; aware inputs are converted first."""
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


UtcDatetime = Annotated[datetime, AfterValidator(to_naive_utc)]


def quantized(places: int) -> AfterValidator:
    """Round a Decimal to the column scale instead of rejecting extra digits."""
    step = Decimal(1).scaleb(-places)

    def _round(value: Optional[Decimal]) -> Optional[Decimal]:
        if value is None:
            return None
        return value.quantize(step, rounding=ROUND_HALF_UP)

    return AfterValidator(_round)


Latitude = Annotated[Decimal, Field(ge=-90, le=90), quantized(8)]
Longitude = Annotated[Decimal, Field(ge=-180, le=180), quantized(8)]
Accuracy = Annotated[Decimal, Field(ge=0, lt=Decimal("1000000")), quantized(2)]
