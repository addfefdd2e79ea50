import datetime
from typing import Annotated

import pydantic
from pydantic.alias_generators import to_camel


def _assume_utc(value: datetime.datetime) -> datetime.datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.UTC)
    return value


UtcDatetime = Annotated[datetime.datetime, pydantic.AfterValidator(_assume_utc)]
"""A datetime that is always timezone aware; naive values are read as UTC."""


class BaseModel(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(
        alias_generator=to_camel, populate_by_name=True, frozen=True
    )
