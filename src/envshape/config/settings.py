"""Settings for the envshape CLI — flags and ``ENVSHAPE_*`` env vars.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``ENVSHAPE_*`` prefix
  3. Code defaults
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings


class EnvshapeSettings(BaseSettings):
    """Unified settings for the envshape CLI.

    Stored on the :class:`~envshape.commands._context.AppContext` built by
    the root group.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ENVSHAPE_",
    }

    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> EnvshapeSettings:
        """Construct settings from a CLI invocation.

        Flags left at their Click default (``False``) do not override
        environment values.
        """
        overrides = {key: value for key, value in cli_flags.items() if value}
        return cls(**overrides)
