from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """JSON bodies use camelCase (longUrl, shortUrl, ...); Python uses snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ShortenRequest(CamelModel):
    # Kept as a plain string: HttpUrl would normalize it (trailing slash),
    # and records are matched on the exact text the client sent.
    long_url: str = Field(..., description="The original URL to be shortened")


class ShortenResponse(CamelModel):
    short_url: str = Field(..., description="Fully qualified short URL")


class AnalyticsResponse(CamelModel):
    """Also the serialized form stored under analytics:<id>:<timeFrame>."""

    time_frame: str
    access_count: int = Field(..., ge=0)
