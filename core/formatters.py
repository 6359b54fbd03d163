# core/formatters.py

# all pure utilities & date helpers
# must never import from models!

import datetime

# === generic text formatters ===


def format_banner_text(title: str, width: int = 40) -> str:
    line = "=" * width
    centered_title = f"{title:^{width}}"

    return f"{line}\n{centered_title}\n{line}"


def format_label(value: str) -> str:
    return value[:1].upper() + value[1:]


def format_optional(value: object, placeholder: str = "[NONE]") -> str:
    return placeholder if value is None or value == "" else str(value)


# === numeric formatters ===


def format_gpa(gpa: float | None) -> str:
    return f"{gpa:.2f}" if gpa is not None else "[NO GPA]"


# === date formatters ===


def format_iso_date_long(iso_date: str) -> str:
    try:
        parsed = datetime.date.fromisoformat(iso_date)
    except ValueError:
        return iso_date or "[NO DATE]"

    return parsed.strftime("%B %d, %Y")
