"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Tootwire, a product of Garudex Labs

Base model for every entity returned by the Mastodon API.
"""

from pydantic import BaseModel, ConfigDict


class Entity(BaseModel):
    """
    Base class for API response payloads.

    Unknown keys are kept on the model so that fields added by newer server
    versions survive a decode and re-encode.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def __str__(self) -> str:
        return self.model_dump_json(exclude_none=True)


class Nothing(Entity):
    """Empty ``{}`` response body."""
    pass
