"""Shared model configuration."""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class TrackerModel(BaseModel):
    """Base for all tracker entities.

    Python code uses snake_case attributes; the JSON export written by the
    tracker app uses camelCase keys, so both are accepted and ``by_alias``
    dumps reproduce the export format.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


def new_id(prefix: str = "") -> str:
    """Generate a unique record id."""
    return f"{prefix}-{uuid4().hex}" if prefix else uuid4().hex
