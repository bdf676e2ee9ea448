"""Configuration model for service-manager."""

from pydantic import BaseModel, Field


class ExecutablesConfig(BaseModel):
    """Names or paths of the external programs that are driven."""

    launchctl: str = Field(default="launchctl", description="launchd control command")
    brew: str = Field(default="brew", description="Homebrew command")


class ListConfig(BaseModel):
    """Defaults for the list command."""

    sort: bool = Field(default=False, description="Order by source then name")


class BrewConfig(BaseModel):
    """Homebrew integration settings."""

    include_by_default: bool = Field(
        default=False,
        alias="includeByDefault",
        description="Include Homebrew services without passing --brew",
    )

    class Config:
        populate_by_name = True


class ManagerConfig(BaseModel):
    """Top-level configuration read from config.yaml."""

    executables: ExecutablesConfig = Field(default_factory=ExecutablesConfig)
    list_defaults: ListConfig = Field(default_factory=ListConfig, alias="list")
    brew: BrewConfig = Field(default_factory=BrewConfig)

    class Config:
        populate_by_name = True
