"""Run configuration schema and loader."""

from __future__ import annotations

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from pitaval.errors import ConfigurationError

__all__ = ["DEFAULT_TEMPLATE", "RunConfig", "load_run_config", "resolve_run_config"]

DEFAULT_TEMPLATE = Path(__file__).resolve().parent / "tei" / "template.xml"


@dataclass(slots=True)
class RunConfig:
    """Settings for one batch conversion run."""

    indir: Path
    outdir: Path
    template: Path = DEFAULT_TEMPLATE
    formatter: str = "lxml"
    verbose: bool = False


def load_run_config(path: str | Path) -> dict[str, Any]:
    """Load raw run settings from a YAML file.

    Args:
        path: Path to a YAML mapping with any of the :class:`RunConfig` keys.

    Returns:
        The mapping as read, with unknown keys rejected.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML, is
            not a mapping, or contains unknown keys.
    """

    src = Path(path)
    try:
        data = yaml.safe_load(src.read_text(encoding="utf-8")) or {}
    except OSError as exc:
        raise ConfigurationError(f"cannot read config {src}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"invalid YAML in {src}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"config {src} must be a mapping")
    known = {f.name for f in fields(RunConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"unknown config keys: {', '.join(unknown)}")
    return data


def resolve_run_config(config_path: str | Path | None = None, **overrides: Any) -> RunConfig:
    """Merge file settings with explicit overrides into a :class:`RunConfig`.

    Overrides whose value is ``None`` leave the file value (or default) in
    place, so unset CLI flags can be passed straight through.

    Raises:
        ConfigurationError: If ``indir`` or ``outdir`` ends up unset.
    """

    data: dict[str, Any] = load_run_config(config_path) if config_path else {}
    data.update({k: v for k, v in overrides.items() if v is not None})

    if not data.get("indir"):
        raise ConfigurationError("no --indir given, aborting")
    if not data.get("outdir"):
        raise ConfigurationError("no --outdir given, aborting")

    return RunConfig(
        indir=Path(data["indir"]).expanduser(),
        outdir=Path(data["outdir"]).expanduser(),
        template=Path(data.get("template") or DEFAULT_TEMPLATE).expanduser(),
        formatter=str(data.get("formatter") or "lxml"),
        verbose=bool(data.get("verbose", False)),
    )
