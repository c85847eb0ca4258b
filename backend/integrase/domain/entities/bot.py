"""
Bot - the record the directory sends with every lifecycle webhook.

Every field has a default so partial payloads decode; unknown keys are ignored.
"""

from pydantic import BaseModel, Field


class Bot(BaseModel):
    bot_id: str = ""
    reviewer: str = ""
    username: str = ""
    description: str = ""
    long_description: str = ""
    nsfw: bool = False
    # Empty unless cross_add is set
    tags: list[str] = Field(default_factory=list)
    owner: str = ""
    extra_owners: list[str] = Field(default_factory=list)
    list_source: str = ""
    reason: str | None = None
    review_note: str | None = None
    # In rare cases this is not sent at all
    cross_add: bool | None = None
    limited: bool = False

    # Optional links
    website: str | None = None
    github: str | None = None
    support: str | None = None
    donate: str | None = None
    library: str | None = None
    prefix: str | None = None
    invite: str | None = None
