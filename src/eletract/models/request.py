"""Provision request model."""

from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Template identifiers that select the TypeScript flavor of Create React App
TYPESCRIPT_TEMPLATES = frozenset({"typescript", "cra-template-typescript"})


class TemplateFlavor(str, Enum):
    """Source flavor of the generated project."""

    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"

    @classmethod
    def from_template(cls, template: Optional[str]) -> "TemplateFlavor":
        """Map a scaffolder template identifier onto a flavor.

        Unknown identifiers are still forwarded to the scaffolder, but the
        provisioner treats them as JavaScript projects.
        """
        if template is not None and template.strip().lower() in TYPESCRIPT_TEMPLATES:
            return cls.TYPESCRIPT
        return cls.JAVASCRIPT

    @property
    def app_entry_suffix(self) -> str:
        """File suffix of the UI entry component for this flavor."""
        return ".tsx" if self is TemplateFlavor.TYPESCRIPT else ".js"


class ProvisionRequest(BaseModel):
    """A request to provision one project directory.

    Attributes:
        target: Name of the project directory to create (a single path component)
        template: Optional scaffolder template identifier (e.g., "typescript")
        base_dir: Directory in which the project directory is created
    """

    model_config = ConfigDict(frozen=True)

    target: str = Field(..., min_length=1)
    template: Optional[str] = None
    base_dir: Path = Field(default_factory=Path.cwd)

    @field_validator("target")
    @classmethod
    def must_be_safe_name(cls, v: str) -> str:
        """Validate that the target is a single, filesystem-safe path component."""
        if v != v.strip():
            raise ValueError("Project directory name must not start or end with whitespace")
        if v in (".", ".."):
            raise ValueError(f"Invalid project directory name: {v!r}")
        if "/" in v or "\\" in v:
            raise ValueError("Project directory name must not contain path separators")
        if any(ord(ch) < 32 for ch in v):
            raise ValueError("Project directory name must not contain control characters")
        return v

    @field_validator("template")
    @classmethod
    def blank_template_is_none(cls, v: Optional[str]) -> Optional[str]:
        """Treat an empty template identifier as no template."""
        if v is not None and not v.strip():
            return None
        return v

    @property
    def flavor(self) -> TemplateFlavor:
        """Flavor selected by the template identifier."""
        return TemplateFlavor.from_template(self.template)

    @property
    def project_root(self) -> Path:
        """Absolute path of the project directory."""
        return (self.base_dir / self.target).resolve()
