"""Configuration models and loaders for sponsor graphics and the contribkit renderer."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

LOGIN_ENV = "CONTRIBKIT_GITHUB_CONTRIBUTIONS_LOGIN"
TOKEN_ENV = "CONTRIBKIT_GITHUB_CONTRIBUTIONS_TOKEN"


class Sponsor(BaseModel):
    """Sponsor identity used for the link wrapper."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name, also used for the element id")
    url: str = Field(..., description="Link target")


class SponsorEntry(Sponsor):
    """Sponsor with the path to its logo SVG."""

    logo: Path = Field(..., description="Logo SVG path")


class SponsorLayout(BaseModel):
    """Layout of the composite sponsor banner."""

    width: float = Field(800.0, gt=0)
    logo_height: float = Field(60.0, gt=0)
    gap: float = Field(20.0, ge=0)
    padding: float = Field(10.0, ge=0)


class SponsorsConfig(BaseModel):
    """Contents of a sponsors YAML file."""

    layout: SponsorLayout = Field(default_factory=SponsorLayout)
    sponsors: list[SponsorEntry] = Field(default_factory=list)


class CamelModel(BaseModel):
    """Base for models serialised in the renderer's camelCase spelling."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GithubContributions(CamelModel):
    """Contribution-graph source settings."""

    login: str | None = Field(None, description="GitHub login")
    token: str | None = Field(None, description="GitHub token")
    logarithmic_scaling: bool = False
    max_contributions: int = Field(100, ge=1)


class Circles(CamelModel):
    """Radii for the circles renderer."""

    radius_max: float = Field(100.0, gt=0)
    radius_min: float = Field(1.0, gt=0)
    radius_past: float = Field(1.0, gt=0)


class Tier(CamelModel):
    """Sponsor tier with a named preset."""

    title: str
    preset: str = "base"


class ContribkitConfig(CamelModel):
    """Renderer configuration for the contribution kit."""

    github_contributions: GithubContributions = Field(default_factory=GithubContributions)
    renderer: str = "circles"
    width: int = Field(1000, gt=0)
    circles: Circles = Field(default_factory=Circles)
    tiers: list[Tier] = Field(default_factory=lambda: [Tier(title="Repo")])


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    with open(path) as f:
        return yaml.safe_load(f) or {}


def load_sponsors_config(path: Path) -> SponsorsConfig:
    """Load a sponsors file, resolving logo paths against its directory."""
    config = SponsorsConfig.model_validate(load_yaml(path))
    config.sponsors = [
        entry if entry.logo.is_absolute()
        else entry.model_copy(update={"logo": path.parent / entry.logo})
        for entry in config.sponsors
    ]
    return config


def load_contribkit_config(
    path: Path | None,
    login: str | None = None,
    token: str | None = None,
) -> ContribkitConfig:
    """Load renderer configuration from YAML.

    Credentials are passed in by the caller rather than read here; when given
    they override the values in the file.

    Args:
        path: Config YAML path, or None for defaults
        login: GitHub login for the contribution graph
        token: GitHub token for the contribution graph

    Returns:
        Validated ContribkitConfig
    """
    data = load_yaml(path) if path is not None and path.exists() else {}
    config = ContribkitConfig.model_validate(data)

    overrides = {k: v for k, v in {"login": login, "token": token}.items() if v}
    if overrides:
        contributions = config.github_contributions.model_copy(update=overrides)
        config = config.model_copy(update={"github_contributions": contributions})
    return config
