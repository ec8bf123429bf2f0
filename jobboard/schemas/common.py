from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts both camelCase (wire format) and snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def trimmed(value: str | None, min_length: int, message: str) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if len(value) < min_length:
        raise ValueError(message)
    return value


def clean_list(values: list[str] | None) -> list[str]:
    return [v.strip() for v in (values or []) if v and v.strip()]
