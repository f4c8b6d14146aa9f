import datetime
import math

from blogsite.consts import DISPLAY_DATE_FORMAT, WORDS_PER_MINUTE


def calculate_reading_time(text: str) -> str:
    words = text.split()
    minutes = math.ceil(len(words) / WORDS_PER_MINUTE) or 1
    return f"{minutes} min"


def format_display_date(value: datetime.datetime) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT)
