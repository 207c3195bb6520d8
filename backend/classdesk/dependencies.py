"""Query-parameter dependencies shared by routers."""
from datetime import date
from typing import Optional

from fastapi import HTTPException, Query, status
from pydantic import ValidationError

from .toolkit.items import DateRange


def date_range_query(
    start: Optional[date] = Query(None, description="First day to include"),
    end: Optional[date] = Query(None, description="Last day to include"),
) -> Optional[DateRange]:
    """Optional inclusive date window from ``?start=&end=``."""
    if start is None and end is None:
        return None
    try:
        return DateRange(start=start, end=end)
    except ValidationError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Start date must not be after end date",
        )
