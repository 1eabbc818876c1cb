"""
Runtime configuration for lexorank.

The only configurable setting is which strategy kind backs a LexoRank when
the caller does not choose one. The alphabet bounds are fixed.
"""

import logging
import os
from typing import Optional

from .constants import STRATEGY_ENV_VAR
from .models import LexoRankKind

logger = logging.getLogger(__name__)

DEFAULT_KIND = LexoRankKind.FIGMA


def get_default_kind(env_value: Optional[str] = None) -> LexoRankKind:
    """
    Resolve the default strategy kind.

    Args:
        env_value: Explicit override; when None the LEXORANK_STRATEGY
            environment variable is read

    Returns:
        The configured kind, or DEFAULT_KIND when unset or unrecognized
    """
    if env_value is None:
        env_value = os.getenv(STRATEGY_ENV_VAR)

    if not env_value or not env_value.strip():
        return DEFAULT_KIND

    try:
        kind = LexoRankKind.from_value(env_value)
    except ValueError:
        logger.warning(
            f"Ignoring {STRATEGY_ENV_VAR}={env_value!r}; "
            f"falling back to {DEFAULT_KIND.value}"
        )
        return DEFAULT_KIND

    logger.info(f"Default ranking strategy set to {kind.value} via {STRATEGY_ENV_VAR}")
    return kind
