# SPDX-FileCopyrightText: 2025 Lucas S
#
# SPDX-License-Identifier: GPL-3.0-or-later

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

ENV_PREFIX = "MOORING_"

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


def _env_bool(environ: Mapping[str, str], var_name: str) -> Optional[bool]:
    value = environ.get(var_name)
    if value is None:
        return None
    value_lower = value.strip().lower()
    if value_lower in _TRUTHY:
        return True
    if value_lower in _FALSY:
        return False
    raise ValueError(f"{var_name} must be a boolean, got {value!r}")


def _env_float(environ: Mapping[str, str], var_name: str) -> Optional[float]:
    value = environ.get(var_name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError as err:
        raise ValueError(f"{var_name} must be a number, got {value!r}") from err


def _env_dict(
    environ: Mapping[str, str],
    var_name: str,
    item_separator: str = ",",
    key_value_separator: str = "=",
) -> dict[str, str]:
    value = environ.get(var_name, "")
    result: dict[str, str] = {}
    for item in value.split(item_separator):
        if key_value_separator in item:
            key, val = item.split(key_value_separator, 1)
            result[key.strip()] = val.strip()
    return result


class ProviderConfig(BaseModel):
    """Settings shared by every request a provider sends"""

    model_config = ConfigDict(validate_assignment=True)

    default_timeout: float = Field(default=30.0, gt=0)
    follow_redirects: bool = True
    verify: bool = True
    headers: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_env(
        cls, prefix: str = ENV_PREFIX, environ: Optional[Mapping[str, str]] = None
    ) -> "ProviderConfig":
        """
        Read settings from environment variables, e.g. MOORING_DEFAULT_TIMEOUT,
        MOORING_FOLLOW_REDIRECTS, MOORING_VERIFY and MOORING_HEADERS
        (``name=value,other=value``). Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ

        values: dict[str, object] = {}

        timeout = _env_float(env, f"{prefix}DEFAULT_TIMEOUT")
        if timeout is not None:
            values["default_timeout"] = timeout

        follow_redirects = _env_bool(env, f"{prefix}FOLLOW_REDIRECTS")
        if follow_redirects is not None:
            values["follow_redirects"] = follow_redirects

        verify = _env_bool(env, f"{prefix}VERIFY")
        if verify is not None:
            values["verify"] = verify

        headers = _env_dict(env, f"{prefix}HEADERS")
        if headers:
            values["headers"] = headers

        return cls.model_validate(values)


__all__ = ["ENV_PREFIX", "ProviderConfig"]
