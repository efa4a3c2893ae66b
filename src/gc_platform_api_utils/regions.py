"""Genesys Cloud region to base URL lookup.

Domains from https://developer.genesys.cloud/platform/api/
"""

from pydantic import BaseModel

from gc_platform_api_utils.errors import PlatformApiError, PlatformErrorKind

REGION_DOMAINS = {
    "us-east-1": "mypurecloud.com",  # US East (Virginia)
    "us-east-2": "use2.us-gov-pure.cloud",  # US East 2 (Ohio)
    "us-west-2": "usw2.pure.cloud",  # US West (Oregon)
    "ca-central-1": "cac1.pure.cloud",  # Canada (Central)
    "eu-west-1": "mypurecloud.ie",  # Europe (Ireland)
    "eu-west-2": "euw2.pure.cloud",  # Europe (London)
    "eu-central-1": "mypurecloud.de",  # Europe (Frankfurt)
    "eu-central-2": "euc2.pure.cloud",  # Europe (Zurich)
    "ap-south-1": "aps1.pure.cloud",  # Asia Pacific (Mumbai)
    "ap-northeast-1": "mypurecloud.jp",  # Asia Pacific (Tokyo)
    "ap-northeast-2": "apne2.pure.cloud",  # Asia Pacific (Seoul)
    "ap-northeast-3": "apne3.pure.cloud",  # Asia Pacific (Osaka)
    "ap-southeast-2": "mypurecloud.com.au",  # Asia Pacific (Sydney)
    "sa-east-1": "sae1.pure.cloud",  # South America (Sao Paulo)
    "me-central-1": "mec1.pure.cloud",  # Middle East (UAE)
}


class RegionUrls(BaseModel):
    """Base URLs of a Genesys Cloud region."""

    api: str
    apps: str
    login: str


def list_regions() -> list[str]:
    return list(REGION_DOMAINS)


def get_region_urls(region: str) -> RegionUrls:
    """Return the API, apps and login URLs for a Genesys Cloud region."""
    if not isinstance(region, str):
        raise PlatformApiError(PlatformErrorKind.REGION_TYPE_INVALID)

    normalized = region.strip().lower()
    if normalized not in REGION_DOMAINS:
        raise PlatformApiError(PlatformErrorKind.REGION_INVALID, region)

    domain = REGION_DOMAINS[normalized]
    return RegionUrls(
        api=f"https://api.{domain}/",
        apps=f"https://apps.{domain}/",
        login=f"https://login.{domain}/",
    )
