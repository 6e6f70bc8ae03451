# core/utils/progress.py
from typing import Optional


def progress_percentage(current_page: Optional[int], page_count: Optional[int]) -> float:
    """Percentage of a book read, from 0.0 to 100.0.

    Books without a page count (None or 0) report 0.0.
    """
    if not page_count or page_count <= 0 or not current_page:
        return 0.0
    return min(round(current_page / page_count * 100, 2), 100.0)
