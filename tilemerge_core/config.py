from __future__ import annotations

import logging
import os
from typing import Optional

_TRUTHY = ('1', 'true', 'yes', 'on')


def env_flag(name: str, default: str = '0') -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def debug_enabled() -> bool:
    """TILEMERGE_DEBUG=1 turns on debug logging for the engine and its front ends."""
    return env_flag('TILEMERGE_DEBUG')


def env_seed() -> Optional[int]:
    """Optional RNG seed from TILEMERGE_SEED; unparsable values are ignored."""
    raw = os.getenv('TILEMERGE_SEED')
    if raw is None or raw.strip() == '':
        return None
    try:
        return int(raw)
    except ValueError:
        logging.getLogger(__name__).warning('ignoring non-integer TILEMERGE_SEED=%r', raw)
        return None


def configure_logging() -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug_enabled() else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
