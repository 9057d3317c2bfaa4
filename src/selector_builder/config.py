"""Builder configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

CSS_COMBINATORS = frozenset({" ", ">", "+", "~"})


def _coerce_bool(raw: str) -> bool:
    return raw.strip().lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class BuilderConfig:
    """Settings shared by a :class:`~selector_builder.builder.SelectorBuilder`."""

    combinators: frozenset[str] = field(default=CSS_COMBINATORS)
    warn_unknown_combinators: bool = True
    log_level: str = "WARNING"  # used by the CLI unless --verbose

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> BuilderConfig:
        """Build a config from ``SELECTOR_BUILDER_*`` environment variables.

        Unset variables keep their defaults.

        Raises:
            ValueError: The log level is not a known logging level name.
        """
        env = os.environ if environ is None else environ
        kwargs: dict[str, object] = {}
        if "SELECTOR_BUILDER_LOG_LEVEL" in env:
            level = env["SELECTOR_BUILDER_LOG_LEVEL"].strip().upper()
            if not isinstance(logging.getLevelName(level), int):
                raise ValueError(f"Invalid SELECTOR_BUILDER_LOG_LEVEL: {level!r}")
            kwargs["log_level"] = level
        if "SELECTOR_BUILDER_WARN_UNKNOWN" in env:
            kwargs["warn_unknown_combinators"] = _coerce_bool(
                env["SELECTOR_BUILDER_WARN_UNKNOWN"]
            )
        return cls(**kwargs)  # type: ignore[arg-type]
