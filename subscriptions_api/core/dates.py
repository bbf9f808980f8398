"""Month-year (MM-YYYY) helpers shared by the schemas and the service layer."""
from __future__ import annotations

import re
from datetime import date
from typing import Any

from subscriptions_api.core.exceptions import InvalidMonthYearError

MONTH_YEAR_FORMAT = "MM-YYYY"
_MONTH_YEAR_RE = re.compile(r"(0[1-9]|1[0-2])-([0-9]{4})")


def parse_month_year(value: Any, field: str = "date") -> date:
    """Parse ``MM-YYYY`` into the first day of that month."""
    if not isinstance(value, str):
        raise InvalidMonthYearError(f"Invalid {field} format. Use {MONTH_YEAR_FORMAT}")
    match = _MONTH_YEAR_RE.fullmatch(value)
    if match is None:
        raise InvalidMonthYearError(f"Invalid {field} format. Use {MONTH_YEAR_FORMAT}")
    month, year = int(match.group(1)), int(match.group(2))
    if year < 1:
        raise InvalidMonthYearError(f"Invalid {field} format. Use {MONTH_YEAR_FORMAT}")
    return date(year, month, 1)


def format_month_year(value: date) -> str:
    return f"{value.month:02d}-{value.year:04d}"
