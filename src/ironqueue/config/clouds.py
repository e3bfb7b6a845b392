"""
Module: clouds.py
Description: Hosted queue service endpoints.

Each Cloud names the scheme, host and port of one hosted region.
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class Cloud(BaseModel):
    """Endpoint of a hosted queue region."""

    model_config = ConfigDict(frozen=True)

    scheme: str = Field(default="https", pattern=r"^https?$")
    host: str = Field(..., min_length=1)
    port: int = Field(default=443, ge=1, le=65535)

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"


IRON_AWS_US_EAST = Cloud(host="mq-aws-us-east-1.iron.io")
IRON_AWS_EU_WEST = Cloud(host="mq-aws-eu-west-1.iron.io")
IRON_RACKSPACE_ORD = Cloud(host="mq-rackspace-ord.iron.io")
IRON_RACKSPACE_LON = Cloud(host="mq-rackspace-lon.iron.io")

CLOUDS: Dict[str, Cloud] = {
    "iron_aws_us_east": IRON_AWS_US_EAST,
    "iron_aws_eu_west": IRON_AWS_EU_WEST,
    "iron_rackspace_ord": IRON_RACKSPACE_ORD,
    "iron_rackspace_lon": IRON_RACKSPACE_LON,
}


def get_cloud(name: str) -> Cloud:
    """
    Resolve a cloud preset by name.

    Args:
        name: Preset name, case insensitive (e.g. 'iron_aws_us_east')

    Returns:
        Matching Cloud

    Raises:
        ValueError: If no preset has that name
    """
    cloud = CLOUDS.get(name.lower())
    if cloud is None:
        raise ValueError(
            f"Unknown cloud '{name}', expected one of: {', '.join(sorted(CLOUDS))}"
        )
    return cloud
