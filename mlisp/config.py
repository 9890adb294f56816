from __future__ import annotations

import os

DEFAULT_PROMPT = "mlisp> "
DEFAULT_LOG_LEVEL = "WARNING"


def setting_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def get_prompt() -> str:
    return setting_from_env("MLISP_PROMPT", DEFAULT_PROMPT)


def get_log_level() -> str:
    return setting_from_env("MLISP_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
