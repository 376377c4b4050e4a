from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper for the pipeline, ensuring that the configuration
dictionary conforms to the expected schema. Handles type coercion, CSV
parsing of list fields, suffix normalization and default value injection.
"""

import logging
from typing import Any, Dict, List, Tuple

from noteindex.domain.config import get_default_config

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["root_path", "output_path", "suffix", "title"]
_LIST_FIELDS = ["ignore_dirs"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Converts untrusted inputs (CLI flags, JSON files) into strictly typed
    parameters and fills missing keys with domain defaults.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _LIST_FIELDS:
        merged[field] = _as_list_str(merged.get(field), defaults[field], field, warnings, strict)

    # An empty hidden prefix is legal and disables hidden-directory pruning
    hidden = merged.get("hidden_prefix")
    if not isinstance(hidden, str):
        msg = f"Invalid field 'hidden_prefix': expected str, received {type(hidden).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        hidden = defaults["hidden_prefix"]
    merged["hidden_prefix"] = hidden

    merged["suffix"] = _normalize_suffix(merged["suffix"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is a list of sanitized strings, supporting CSV parsing."""
    if value is None:
        return list(fallback)

    if isinstance(value, str) and not strict:
        warnings.append(f"Field '{field}' converted from CSV string to list.")
        return [x.strip() for x in value.split(",") if x.strip()]

    if isinstance(value, list):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_suffix(suffix: str, warnings: List[str], strict: bool) -> str:
    """
    Add the leading dot to a bare extension ('md' -> '.md').

    Any other suffix ('.md', '-draft.md', '_notes.txt') is matched verbatim
    against file names and passes through untouched.
    """
    if not suffix.isalnum():
        return suffix
    if strict:
        raise ValueError(f"Invalid suffix '{suffix}': bare extensions must start with '.'.")
    warnings.append(f"Suffix '{suffix}' corrected to '.{suffix}'.")
    return "." + suffix
