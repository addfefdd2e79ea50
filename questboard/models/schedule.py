from datetime import time

from ._base import BaseModel


class UpcomingClass(BaseModel):
    id: str
    course_name: str
    course_code: str
    instructor: str
    room: str
    start_time: time
    end_time: time
    color: str
    is_next: bool = False
    is_ongoing: bool = False
    starts_in: str | None = None
