import json
import os
from dataclasses import dataclass, fields, replace
from pathlib import Path

# Repository root: templates/ and static/ live next to the package
PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_PORT = 8081
DEFAULT_CODE_STYLE = "dracula"
MARKDOWN_EXTENSION = ".md"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for the site."""

    content_dir: Path = PROJECT_ROOT / "static" / "content" / "blogs"
    templates_dir: Path = PROJECT_ROOT / "templates"
    static_dir: Path = PROJECT_ROOT / "static"
    site_title: str = "Portfolio"
    code_style: str = DEFAULT_CODE_STYLE
    sort_posts: bool = False
    port: int = DEFAULT_PORT
    log_file: str = ""

    @classmethod
    def from_env(cls, environ=None):
        """Builds settings from environment variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        defaults = cls()

        port = env.get("APP_PORT") or ""
        return cls(
            content_dir=Path(env.get("PORTFOLIO_CONTENT_DIR") or defaults.content_dir),
            templates_dir=Path(env.get("PORTFOLIO_TEMPLATES_DIR") or defaults.templates_dir),
            static_dir=Path(env.get("PORTFOLIO_STATIC_DIR") or defaults.static_dir),
            site_title=env.get("PORTFOLIO_SITE_TITLE") or defaults.site_title,
            code_style=env.get("PORTFOLIO_CODE_STYLE") or defaults.code_style,
            sort_posts=(env.get("PORTFOLIO_SORT_POSTS") or "").lower() in _TRUTHY,
            port=int(port) if port else defaults.port,
            log_file=env.get("PORTFOLIO_LOG_FILE") or defaults.log_file,
        )

    def with_overrides(self, overrides):
        """Returns a copy with the known keys of ``overrides`` applied."""
        known = {f.name for f in fields(self)}
        values = {}
        for key, value in overrides.items():
            if key not in known:
                continue
            if key.endswith("_dir"):
                value = Path(value)
            elif key == "port":
                value = int(value)
            elif key == "sort_posts" and isinstance(value, str):
                value = value.lower() in _TRUTHY
            values[key] = value
        return replace(self, **values)


def load_settings(config_file=None, environ=None):
    """
    Loads settings from the environment and, if given, a JSON config file.
    Values in the file win over the environment.
    """
    settings = Settings.from_env(environ)
    if not config_file:
        return settings

    if not os.path.exists(config_file):
        raise FileNotFoundError(f"❌ Config file not found: {config_file}")

    with open(config_file, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"❌ {config_file} must contain a JSON object")

    return settings.with_overrides(data)
