from pydantic import BaseModel, ConfigDict, HttpUrl, PositiveFloat, field_validator

from ._utils._body import BodyType
from ._utils.constants import DEFAULT_TIMEOUT


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    endpoint: str
    body_type: BodyType = BodyType.FORM
    timeout: PositiveFloat = DEFAULT_TIMEOUT

    @field_validator("endpoint", mode="before")
    @classmethod
    def normalize_endpoint(cls, value):
        # exactly one trailing slash
        if isinstance(value, str):
            return value.rstrip("/") + "/"
        return value

    @field_validator("endpoint")
    @classmethod
    def validate_endpoint(cls, value: str) -> str:
        url = HttpUrl(value)
        assert url.host, "Invalid URL"
        return value

    @field_validator("body_type", mode="before")
    @classmethod
    def validate_body_type(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value
