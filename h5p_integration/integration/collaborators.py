"""
Collaborator contracts for the settings synthesizer, with default
implementations.

The synthesizer treats all of these as opaque services:

    ParameterFilter   content -> sanitized JSON parameters
    DisplayOptionsFn  disabled-features bitmask -> DisplayOptions
    TokenGenerator    (operation, content id) -> single-use token

The defaults are enough to run the service standalone; a host platform
injects its own validation engine and token issuer instead.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import logging
import math
import time
from enum import IntFlag
from typing import TYPE_CHECKING, Callable, Protocol

from h5p_integration.errors import ParameterFilterError

from .schemas import DisplayOptions

if TYPE_CHECKING:
    from h5p_integration.storage.schemas import ContentRecord

logger = logging.getLogger(__name__)


class ParameterFilter(Protocol):
    def __call__(self, content: ContentRecord) -> str:
        ...


class TokenGenerator(Protocol):
    def __call__(self, operation: str, content_id: int) -> str:
        ...


DisplayOptionsFn = Callable[[int], DisplayOptions]


# =============================================================================
# Parameter filtering
# =============================================================================


class JsonParameterFilter:
    """
    Minimal parameter filter.

    Parses the raw parameters and re-serializes them compactly. Anything that
    is not a JSON object is rejected. Always works from the raw parameters;
    a previously stored filtered value is ignored.
    """

    def __call__(self, content: ContentRecord) -> str:
        try:
            params = json.loads(content.parameters)
        except ValueError as e:
            raise ParameterFilterError(content.id, f"invalid JSON: {e}") from e

        if not isinstance(params, dict):
            raise ParameterFilterError(content.id, "parameters must be a JSON object")

        return json.dumps(params, ensure_ascii=False, separators=(",", ":"))


# =============================================================================
# Display options
# =============================================================================


class DisabledFeature(IntFlag):
    """Bits of the content's disabled-features mask."""

    NONE = 0
    FRAME = 1
    DOWNLOAD = 2
    EMBED = 4
    COPYRIGHT = 8
    ABOUT = 16


def decode_display_options(disabled_features: int) -> DisplayOptions:
    """Turn a disabled-features bitmask into the options shown in the editor."""
    disabled = DisabledFeature(disabled_features & 0x1F)
    return DisplayOptions(
        frame=DisabledFeature.FRAME not in disabled,
        export=DisabledFeature.DOWNLOAD not in disabled,
        embed=DisabledFeature.EMBED not in disabled,
        copyright=DisabledFeature.COPYRIGHT not in disabled,
        icon=DisabledFeature.ABOUT not in disabled,
    )


# =============================================================================
# Security tokens
# =============================================================================


class HmacTokenGenerator:
    """
    Time-windowed tokens for editor AJAX calls.

    A token is valid in the window it was issued in and the one after it,
    so it lives between `lifetime / 2` and `lifetime` seconds.

    Example:
        tokens = HmacTokenGenerator("secret")
        token = tokens("editorajax", 7)
        assert tokens.verify(token, "editorajax", 7)
    """

    TOKEN_LENGTH = 13

    def __init__(
        self,
        secret: str,
        *,
        lifetime: int = 86400,
        clock: Callable[[], float] = time.time,
    ):
        if not secret:
            logger.warning("[tokens] No token secret configured, tokens are predictable")
        self._secret = secret.encode("utf-8")
        self._window = max(lifetime // 2, 1)
        self._clock = clock

    def _time_factor(self) -> int:
        return math.ceil(self._clock() / self._window)

    def _sign(self, operation: str, content_id: int, factor: int) -> str:
        message = f"{operation}:{content_id}:{factor}".encode("utf-8")
        digest = hmac.new(self._secret, message, hashlib.sha256).hexdigest()
        return digest[-16:][: self.TOKEN_LENGTH]

    def __call__(self, operation: str, content_id: int) -> str:
        return self._sign(operation, content_id, self._time_factor())

    def verify(self, token: str, operation: str, content_id: int) -> bool:
        """Check a token against the current and the previous window."""
        factor = self._time_factor()
        return any(
            hmac.compare_digest(token, self._sign(operation, content_id, f))
            for f in (factor, factor - 1)
        )
