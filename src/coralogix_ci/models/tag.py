"""
Module: tag.py
Description: Tag payload model for the Coralogix tags API.

A tag marks a point in time (typically a release or deployment) for
one or more applications and subsystems.
"""

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from .log import current_millis


class TagEvent(BaseModel):
    """
    Point-in-time marker correlated with applications and subsystems.

    Attributes:
        timestamp: Creation time in milliseconds since the epoch
        name: Tag name, e.g. 'release-1'
        applications: Application names, order preserved
        subsystems: Subsystem names, order preserved
        icon_url: Optional icon URL, passed through unescaped
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    timestamp: int = Field(default_factory=current_millis, ge=0)
    name: str = Field(..., description="Tag name")
    applications: Tuple[str, ...] = Field(default=(), alias="application")
    subsystems: Tuple[str, ...] = Field(default=(), alias="subsystem")
    icon_url: Optional[str] = Field(default=None, alias="iconUrl")

    def to_json(self) -> str:
        """Serialize to the JSON body of the tags API."""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    def to_query_params(self, secret_key: str) -> Dict[str, str]:
        """Query parameters for the deprecated GET tag endpoint."""
        params = {
            'key': secret_key,
            'application': ','.join(self.applications),
            'subsystem': ','.join(self.subsystems),
            'name': self.name,
        }
        if self.icon_url is not None:
            params['iconUrl'] = self.icon_url
        return params
