from __future__ import annotations

import os
from dataclasses import dataclass

_ENV_PREFIX = "THEMESTYLES_"


@dataclass(frozen=True)
class StylesConfig:
    out_dir: str = "."
    encoding: str = "utf-8"
    swatch_size: int = 50
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> StylesConfig:
        """Build a config, overriding defaults with ``THEMESTYLES_*`` variables.

        Raises :class:`ValueError` when ``THEMESTYLES_SWATCH_SIZE`` is not an integer.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        raw_size = env.get(_ENV_PREFIX + "SWATCH_SIZE", str(defaults.swatch_size))
        try:
            swatch_size = int(raw_size)
        except ValueError:
            raise ValueError(
                f"{_ENV_PREFIX}SWATCH_SIZE must be an integer, got {raw_size!r}"
            ) from None
        return cls(
            out_dir=env.get(_ENV_PREFIX + "OUT_DIR", defaults.out_dir),
            encoding=env.get(_ENV_PREFIX + "ENCODING", defaults.encoding),
            swatch_size=swatch_size,
            log_level=env.get(_ENV_PREFIX + "LOG_LEVEL", defaults.log_level).upper(),
        )
