"""Settings loading with deterministic precedence.

The cascade is always:
1) CLI params
2) Environment variables
3) ~/.config/armor/armor.yaml
4) Built-in model defaults

Environment variable format:
- Prefix: ``ARMOR_``
- Nested keys: ``__`` separator
- Example: ``ARMOR_SERVER__DEBUGGING_LEVEL=1`` -> ``server.debugging_level = 1``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar, Mapping

from .models import DEFAULT_CONFIG_PATH, ArmorSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> ArmorSettings:
    """Load ``ArmorSettings`` applying the standard precedence cascade."""
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH

    class _PathBoundSettings(ArmorSettings):
        _config_path: ClassVar[Path] = resolved

    return _PathBoundSettings(**dict(cli_params or {}))
