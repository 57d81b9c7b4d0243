from pathlib import Path
from fastapi.templating import Jinja2Templates
from datetime import datetime, timezone

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

def format_date_filter(value, format_str="%d/%m/%Y"):
    if value is None:
        return ""
    if isinstance(value, (int, float)):
        # Visit dates are epoch milliseconds
        value = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    elif isinstance(value, str):
        try:
            value = datetime.strptime(value, "%Y-%m-%d")
        except ValueError:
            return value
    return value.strftime(format_str)

templates.env.filters["format_date"] = format_date_filter
