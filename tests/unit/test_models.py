"""Unit tests for the provision request model."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from eletract.models import ProvisionRequest, TemplateFlavor


@pytest.mark.unit
class TestProvisionRequest:
    """Tests for ProvisionRequest."""

    def test_valid_request(self, tmp_path: Path) -> None:
        """A plain name and template are accepted."""
        request = ProvisionRequest(target="my-app", template="typescript", base_dir=tmp_path)

        assert request.target == "my-app"
        assert request.template == "typescript"
        assert request.project_root == (tmp_path / "my-app").resolve()

    def test_base_dir_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without base_dir the project is created in the working directory."""
        monkeypatch.chdir(tmp_path)

        request = ProvisionRequest(target="my-app")

        assert request.project_root == (tmp_path / "my-app").resolve()

    @pytest.mark.parametrize(
        "target",
        ["", ".", "..", "a/b", "a\\b", " app", "app ", "app\x00", "app\n"],
    )
    def test_unsafe_names_rejected(self, target: str) -> None:
        """Names that are not a single safe path component are rejected."""
        with pytest.raises(ValidationError):
            ProvisionRequest(target=target)

    def test_request_is_immutable(self) -> None:
        """Fields cannot be reassigned."""
        request = ProvisionRequest(target="my-app")

        with pytest.raises(ValidationError):
            request.target = "other"  # type: ignore[misc]

    def test_blank_template_is_none(self) -> None:
        """An empty template behaves like no template."""
        request = ProvisionRequest(target="my-app", template="  ")

        assert request.template is None
        assert request.flavor == TemplateFlavor.JAVASCRIPT


@pytest.mark.unit
class TestTemplateFlavor:
    """Tests for TemplateFlavor."""

    @pytest.mark.parametrize(
        "template,expected",
        [
            (None, TemplateFlavor.JAVASCRIPT),
            ("typescript", TemplateFlavor.TYPESCRIPT),
            ("TypeScript", TemplateFlavor.TYPESCRIPT),
            ("cra-template-typescript", TemplateFlavor.TYPESCRIPT),
            ("cra-template-pwa", TemplateFlavor.JAVASCRIPT),
            ("redux", TemplateFlavor.JAVASCRIPT),
        ],
    )
    def test_from_template(self, template, expected) -> None:
        """Only TypeScript templates select the TypeScript flavor."""
        assert TemplateFlavor.from_template(template) == expected

    def test_app_entry_suffix(self) -> None:
        """Each flavor has its own App component extension."""
        assert TemplateFlavor.JAVASCRIPT.app_entry_suffix == ".js"
        assert TemplateFlavor.TYPESCRIPT.app_entry_suffix == ".tsx"
