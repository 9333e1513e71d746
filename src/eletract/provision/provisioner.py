"""React + Electron project provisioner.

Provisions a new project directory in a fixed sequence of steps:
- scaffold: create the React project with create-react-app
- install-shell: add Electron as a development dependency
- install-telemetry: add web-vitals (JavaScript template only)
- ensure-app-entry: make sure src/App.tsx or src/App.js exists
- patch-bootstrap: drop web-vitals from src/index.tsx (TypeScript template only)
- install-helpers: add concurrently and wait-on as development dependencies
- shell-directory / shell-entry: write electron/electron.js
- read-manifest / update-manifest / write-manifest: point package.json at Electron

The first failing step aborts the run. Completed steps are not rolled back;
they are recorded in a checkpoint so the run can be continued with resume=True.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from eletract import __version__
from eletract.config import EletractConfig
from eletract.errors import (
    CheckpointError,
    DestinationExistsError,
    ProvisionError,
    ProvisionStepError,
)
from eletract.lib.process import CommandRunner
from eletract.models import ProvisionRequest, TemplateFlavor
from eletract.project import (
    BOOTSTRAP_FILE,
    MANIFEST_FILE,
    SHELL_DIR,
    SHELL_ENTRY_FILE,
    SHELL_ENTRY_SOURCE,
    BootstrapPatcher,
    TextPatternBootstrapPatcher,
    add_desktop_scripts,
    app_entry_candidates,
    app_entry_file,
    app_entry_source,
    load_manifest,
    write_manifest,
)
from eletract.provision.checkpoint import (
    Checkpoint,
    clear_checkpoint,
    read_checkpoint,
    write_checkpoint,
)

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str], None]


@dataclass
class ProvisionResult:
    """Result of provisioning a project."""

    project_root: Path
    flavor: TemplateFlavor
    steps_completed: list[str]
    steps_skipped: list[str]
    steps_resumed: list[str]
    files_written: list[str]
    dry_run: bool = False


@dataclass
class ProvisionContext:
    """State shared by the steps of one provisioning run."""

    request: ProvisionRequest
    config: EletractConfig
    runner: CommandRunner
    patcher: BootstrapPatcher
    project_root: Path
    manifest: Optional[Dict[str, Any]] = None
    files_written: list[str] = field(default_factory=list)

    @property
    def flavor(self) -> TemplateFlavor:
        return self.request.flavor

    def write_file(self, relative_path: str, content: str) -> None:
        (self.project_root / relative_path).write_text(content, encoding="utf-8")
        if relative_path not in self.files_written:
            self.files_written.append(relative_path)


@dataclass(frozen=True)
class Step:
    """One pipeline step.

    Attributes:
        name: Stable identifier, recorded in the checkpoint
        label: Human-readable description used in progress and error messages
        action: Callable performing the step, called with the context and label
        flavors: Flavors the step applies to (others skip it)
        checkpointed: Whether completion is recorded for --resume
    """

    name: str
    label: str
    action: Callable[[ProvisionContext, str], None]
    flavors: frozenset[TemplateFlavor] = frozenset(TemplateFlavor)
    checkpointed: bool = True

    def applies_to(self, flavor: TemplateFlavor) -> bool:
        return flavor in self.flavors


def _install(ctx: ProvisionContext, label: str, packages: list[str], dev: bool) -> None:
    cmd = list(ctx.config.installer) + packages
    if dev:
        cmd.append(ctx.config.dev_only_flag)
    ctx.runner.run(cmd, cwd=ctx.project_root, step=label)


def _scaffold(ctx: ProvisionContext, label: str) -> None:
    request = ctx.request
    cmd = list(ctx.config.scaffolder) + [request.target]
    if request.template:
        cmd += ["--template", request.template]

    ctx.runner.run(cmd, cwd=request.base_dir, step=label)

    if not ctx.project_root.is_dir():
        raise ProvisionStepError(
            f"{label} failed: {ctx.project_root} was not created", step=label
        )


def _install_shell(ctx: ProvisionContext, label: str) -> None:
    _install(ctx, label, [ctx.config.shell_package], dev=True)


def _install_telemetry(ctx: ProvisionContext, label: str) -> None:
    _install(ctx, label, [ctx.config.telemetry_package], dev=False)


def _install_helpers(ctx: ProvisionContext, label: str) -> None:
    _install(ctx, label, list(ctx.config.helper_packages), dev=True)


def _ensure_app_entry(ctx: ProvisionContext, label: str) -> None:
    for candidate in app_entry_candidates():
        if (ctx.project_root / candidate).exists():
            logger.info(f"{candidate} already exists, leaving it untouched")
            return

    entry_file = app_entry_file(ctx.flavor)
    (ctx.project_root / entry_file).parent.mkdir(parents=True, exist_ok=True)
    ctx.write_file(entry_file, app_entry_source(ctx.flavor))
    logger.info(f"Created placeholder {entry_file}")


def _patch_bootstrap(ctx: ProvisionContext, label: str) -> None:
    bootstrap = ctx.project_root / BOOTSTRAP_FILE
    if not bootstrap.exists():
        logger.warning(f"{BOOTSTRAP_FILE} not found, skipping bootstrap patch")
        return

    original = bootstrap.read_text(encoding="utf-8")
    patched = ctx.patcher.patch(original)
    if patched != original:
        ctx.write_file(BOOTSTRAP_FILE, patched)
        logger.info(f"Patched {BOOTSTRAP_FILE}")


def _create_shell_directory(ctx: ProvisionContext, label: str) -> None:
    shell_dir = ctx.project_root / SHELL_DIR
    if not shell_dir.exists():
        shell_dir.mkdir()


def _write_shell_entry(ctx: ProvisionContext, label: str) -> None:
    ctx.write_file(SHELL_ENTRY_FILE, SHELL_ENTRY_SOURCE)


def _read_manifest(ctx: ProvisionContext, label: str) -> None:
    ctx.manifest = load_manifest(ctx.project_root / MANIFEST_FILE)


def _update_manifest(ctx: ProvisionContext, label: str) -> None:
    if ctx.manifest is None:
        raise ProvisionStepError(f"{label} failed: {MANIFEST_FILE} has not been read", step=label)
    add_desktop_scripts(ctx.manifest)


def _write_manifest(ctx: ProvisionContext, label: str) -> None:
    if ctx.manifest is None:
        raise ProvisionStepError(f"{label} failed: {MANIFEST_FILE} has not been read", step=label)
    write_manifest(ctx.project_root / MANIFEST_FILE, ctx.manifest)
    if MANIFEST_FILE not in ctx.files_written:
        ctx.files_written.append(MANIFEST_FILE)


def build_steps(config: EletractConfig) -> list[Step]:
    """Build the ordered list of pipeline steps for a configuration."""
    javascript_only = frozenset({TemplateFlavor.JAVASCRIPT})
    typescript_only = frozenset({TemplateFlavor.TYPESCRIPT})

    return [
        Step("scaffold", f"running {config.scaffolder[-1]}", _scaffold),
        Step("install-shell", f"installing {config.shell_package}", _install_shell),
        Step(
            "install-telemetry",
            f"installing {config.telemetry_package}",
            _install_telemetry,
            flavors=javascript_only,
        ),
        Step("ensure-app-entry", "checking the App component", _ensure_app_entry),
        Step(
            "patch-bootstrap",
            f"patching {BOOTSTRAP_FILE}",
            _patch_bootstrap,
            flavors=typescript_only,
        ),
        Step(
            "install-helpers",
            f"installing {' and '.join(config.helper_packages)}",
            _install_helpers,
        ),
        Step("shell-directory", f"creating the {SHELL_DIR} folder", _create_shell_directory),
        Step("shell-entry", f"writing {SHELL_ENTRY_FILE}", _write_shell_entry),
        Step("read-manifest", f"reading {MANIFEST_FILE}", _read_manifest, checkpointed=False),
        Step(
            "update-manifest", f"updating {MANIFEST_FILE}", _update_manifest, checkpointed=False
        ),
        Step("write-manifest", f"writing {MANIFEST_FILE}", _write_manifest),
    ]


def _load_resume_checkpoint(request: ProvisionRequest) -> Checkpoint:
    """Load the checkpoint of an existing project directory for --resume."""
    project_root = request.project_root
    checkpoint = read_checkpoint(project_root)
    if checkpoint is None:
        raise CheckpointError(
            f"Cannot resume {project_root}: no checkpoint found. "
            f"Remove the directory and run again."
        )
    if checkpoint.template != request.template:
        raise CheckpointError(
            f"Cannot resume {project_root}: it was started with template "
            f"{checkpoint.template!r}, not {request.template!r}"
        )
    # Step names may differ between releases
    if checkpoint.version != __version__:
        raise CheckpointError(
            f"Cannot resume {project_root}: it was started with eletract "
            f"{checkpoint.version}, this is {__version__}. "
            f"Remove the directory and run again."
        )
    return checkpoint


def provision_project(
    request: ProvisionRequest,
    config: Optional[EletractConfig] = None,
    runner: Optional[CommandRunner] = None,
    patcher: Optional[BootstrapPatcher] = None,
    dry_run: bool = False,
    resume: bool = False,
    progress: Optional[ProgressCallback] = None,
) -> ProvisionResult:
    """Provision a React + Electron project.

    Args:
        request: What to create and with which template
        config: Commands and packages to use (defaults to built-in configuration)
        runner: External command runner
        patcher: Bootstrap file patcher for the TypeScript template
        dry_run: Only report which steps would run
        resume: Continue a previously interrupted run in an existing directory
        progress: Called with a message before each step runs

    Returns:
        ProvisionResult with details of the run

    Raises:
        DestinationExistsError: If the project directory already exists (and
            resume is not requested)
        CheckpointError: If resume is requested but the run cannot be resumed
        ExternalCommandError: If the scaffolder or installer fails
        ManifestError: If package.json cannot be read, parsed, or updated
        ProvisionStepError: If a step fails while writing files
    """
    config = config or EletractConfig()
    runner = runner or CommandRunner()
    patcher = patcher or TextPatternBootstrapPatcher()
    project_root = request.project_root
    flavor = request.flavor

    checkpoint = Checkpoint(template=request.template)
    if project_root.exists():
        if not resume:
            raise DestinationExistsError(project_root)
        checkpoint = _load_resume_checkpoint(request)
        logger.info(f"Resuming {project_root}: completed {', '.join(checkpoint.completed)}")

    ctx = ProvisionContext(
        request=request,
        config=config,
        runner=runner,
        patcher=patcher,
        project_root=project_root,
    )
    result = ProvisionResult(
        project_root=project_root,
        flavor=flavor,
        steps_completed=[],
        steps_skipped=[],
        steps_resumed=[],
        files_written=ctx.files_written,
        dry_run=dry_run,
    )

    logger.info(f"Provisioning {project_root} ({flavor.value})")

    for step in build_steps(config):
        if not step.applies_to(flavor):
            logger.debug(f"Skipping {step.name}: not used for {flavor.value} projects")
            result.steps_skipped.append(step.name)
            continue

        if checkpoint.is_done(step.name):
            logger.debug(f"Skipping {step.name}: already completed")
            result.steps_resumed.append(step.name)
            continue

        if progress is not None:
            if dry_run:
                progress(f"[DRY RUN] {step.label}")
            else:
                progress(f"{step.label[:1].upper()}{step.label[1:]}...")

        if dry_run:
            result.steps_completed.append(step.name)
            continue

        try:
            step.action(ctx, step.label)
            if step.checkpointed:
                checkpoint.mark_done(step.name)
                write_checkpoint(project_root, checkpoint)
        except ProvisionError as e:
            if e.step is None:
                e.step = step.label
            logger.error(f"Step {step.name} failed")
            raise
        except (OSError, UnicodeError) as e:
            logger.error(f"Step {step.name} failed: {e}")
            raise ProvisionStepError(f"{step.label} failed: {e}", step=step.label) from e

        result.steps_completed.append(step.name)

    if not dry_run:
        try:
            clear_checkpoint(project_root)
        except OSError as e:
            raise ProvisionStepError(
                f"removing checkpoint failed: {e}", step="removing checkpoint"
            ) from e
        logger.info(f"Provisioned {project_root}")

    return result
