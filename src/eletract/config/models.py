"""Configuration models for eletract."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


class EletractConfig(BaseModel):
    """Root configuration model for eletract.

    Attributes:
        scaffolder: Command that creates the frontend project (target name is appended)
        installer: Package installer command (package names are appended)
        dev_only_flag: Installer flag marking a development-only dependency
        shell_package: Desktop shell runtime package
        telemetry_package: Web vitals reporting package (JavaScript template only)
        helper_packages: Packages used by the generated ``dev`` script
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    scaffolder: List[str] = Field(default_factory=lambda: ["npx", "create-react-app"])
    installer: List[str] = Field(default_factory=lambda: ["npm", "install"])
    dev_only_flag: str = "--save-dev"
    shell_package: str = "electron"
    telemetry_package: str = "web-vitals"
    helper_packages: List[str] = Field(default_factory=lambda: ["concurrently", "wait-on"])

    @field_validator("scaffolder", "installer", "helper_packages")
    @classmethod
    def must_not_be_empty(cls, v: List[str]) -> List[str]:
        """Validate that command and package lists are non-empty."""
        if not v or not all(part.strip() for part in v):
            raise ValueError("must be a non-empty list of non-empty strings")
        return v
