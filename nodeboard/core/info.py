"""SystemInfo record and its JSON wire form."""

from pydantic import BaseModel, ConfigDict, Field

from ..config import SCRIPT_VERSION


class SystemInfo(BaseModel):
    """Machine identity reported to the onboarding endpoint.

    Field order is the order of keys in the JSON body.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    mac_address: str = Field(
        ..., alias="macAddress", description="Hardware address of the interface"
    )
    ip_address: str = Field(
        ..., alias="ipAddress", description="Dotted-decimal IPv4 address"
    )
    os: str = Field(..., description="Operating system family (e.g. linux)")
    token: str = Field(..., description="Registration token, trimmed")
    script_version: str = Field(
        default=SCRIPT_VERSION, alias="scriptVersion", description="Agent version"
    )

    def to_json(self) -> str:
        """
        Serialize to the compact JSON body sent to the server.

        Returns:
            JSON string keyed by wire names (macAddress, ipAddress, ...)
        """
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, json_str: str) -> "SystemInfo":
        """
        Deserialize from a JSON body.

        Args:
            json_str: JSON string to parse

        Returns:
            SystemInfo instance
        """
        return cls.model_validate_json(json_str)


def build_system_info(
    mac_address: str,
    ip_address: str,
    os_name: str,
    token: str,
    script_version: str = SCRIPT_VERSION,
) -> SystemInfo:
    """Assemble the record from already-resolved fields."""
    return SystemInfo(
        mac_address=mac_address,
        ip_address=ip_address,
        os=os_name,
        token=token,
        script_version=script_version,
    )
