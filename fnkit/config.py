from __future__ import annotations
import os


_FALSE_VALUES = ('0', 'false', 'no', 'off')

# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'


def flag_from_env(var: str, default: bool) -> bool:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() not in _FALSE_VALUES


def cycle_safe() -> bool:
    return flag_from_env('FNKIT_CYCLE_SAFE', True)


def get_log_level() -> str:
    raw = os.environ.get('FNKIT_LOG_LEVEL')
    return raw.strip().upper() if raw and raw.strip() else _DEFAULT_LOG_LEVEL
