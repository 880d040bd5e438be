"""Process-wide configuration for the onboarding agent."""

from pydantic import BaseModel, ConfigDict, Field

from . import __version__

ONBOARD_URL = "https://unode-backend.techmentor.solutions/onboard/system/info"

# Default of the token option; seeing it after parsing means "not supplied"
INVALID_TOKEN = "invalid-token"

SCRIPT_VERSION = __version__

DEFAULT_TIMEOUT = 30.0
USER_AGENT = f"nodeboard/{__version__}"


class AgentSettings(BaseModel):
    """Runtime settings resolved once from the command line."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(default=ONBOARD_URL, description="Onboarding endpoint")
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="HTTP timeout in seconds"
    )
    dry_run: bool = Field(default=False, description="Skip the POST")
