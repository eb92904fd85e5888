"""Environment-driven settings for the lettercalc CLI.

Defaults live here, environment variables override them, and command-line
options override the environment. The evaluator itself never reads the
environment; it takes the group mode as an argument.

    LETTERCALC_GROUP_MODE   flat | nested   (default: flat)
    LETTERCALC_VERBOSE      1/true/yes/on enables DEBUG logging
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from lettercalc.models import GroupMode

GROUP_MODE_VAR = "LETTERCALC_GROUP_MODE"
VERBOSE_VAR = "LETTERCALC_VERBOSE"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass
class Settings:
    """Resolved settings for one CLI invocation."""

    group_mode: GroupMode = GroupMode.FLAT
    verbose: bool = False

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        group_mode: Optional[GroupMode] = None,
    ) -> Settings:
        """Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (used by tests).
            group_mode: Explicit mode from the command line. When given,
                LETTERCALC_GROUP_MODE is not read at all.

        Raises:
            ValueError: if LETTERCALC_GROUP_MODE is read and names an unknown mode.
        """
        env = os.environ if environ is None else environ
        settings = cls()

        raw_mode = env.get(GROUP_MODE_VAR, "").strip().lower()
        if group_mode is not None:
            settings.group_mode = group_mode
        elif raw_mode:
            try:
                settings.group_mode = GroupMode(raw_mode)
            except ValueError:
                choices = ", ".join(m.value for m in GroupMode)
                raise ValueError(
                    f"{GROUP_MODE_VAR}={env[GROUP_MODE_VAR]!r} is not one of: {choices}"
                ) from None

        settings.verbose = env.get(VERBOSE_VAR, "").strip().lower() in _TRUTHY
        return settings
