"""
SOLE RESPONSIBILITY: Drives the server settings screen (save and reset workflows)
independently of how the screen is rendered.

Save:  IDLE -> PROBING -> CONFIRM_PENDING -> IDLE, or back to IDLE with an error.
Reset: IDLE -> CONFIRM_PENDING -> IDLE.
"""

import logging
from enum import Enum
from typing import Awaitable, Callable, Optional

from ..core.models import ProbeResult
from ..core.probe import probe_server
from ..core.server_config import ServerConfigStore
from ..core.validation import validate_server_url

logger = logging.getLogger(__name__)

ENTER_URL_MESSAGE = "Please enter a server URL"
CHANGE_SERVER_TITLE = "Change Server"
CHANGE_SERVER_MESSAGE = "Continue with this server? You will need to log in again to use it."
RESET_SERVER_TITLE = "Reset to Default"
RESET_SERVER_MESSAGE = "Reset the server to the default?"
CUSTOM_SERVER_STATUS = "Currently using custom server"

ConfirmCallback = Callable[[str, str], Awaitable[bool]]
Prober = Callable[[str], Awaitable[ProbeResult]]
StateListener = Callable[["ScreenState"], None]


class ScreenState(str, Enum):
    """Screen workflow state."""

    IDLE = "idle"
    PROBING = "probing"
    CONFIRM_PENDING = "confirm_pending"


class ScreenOutcome(str, Enum):
    """How a save or reset request ended."""

    SAVED = "saved"
    RESET = "reset"
    DECLINED = "declined"  # User said no at the confirmation prompt
    INVALID = "invalid"  # Rejected locally, no request sent
    PROBE_FAILED = "probe_failed"
    BUSY = "busy"  # Another request is still outstanding
    ABANDONED = "abandoned"  # Screen closed before the result arrived


class ServerSettingsScreen:
    """State behind the server settings form.

    The renderer owns the widgets and the confirmation prompt. It redraws from
    input_url, error, is_validating and status_text after each call.
    """

    def __init__(
        self,
        config: ServerConfigStore,
        confirm: ConfirmCallback,
        prober: Prober = probe_server,
        on_state_change: Optional[StateListener] = None,
    ):
        self.config = config
        self.confirm = confirm
        self.prober = prober
        self.on_state_change = on_state_change

        # Only a custom server pre-fills the field
        self.input_url = config.get_effective_url() if config.is_using_custom_server() else ""
        self.error: Optional[str] = None
        self.state = ScreenState.IDLE
        self._closed = False

    @property
    def is_validating(self) -> bool:
        return self.state == ScreenState.PROBING

    @property
    def is_closed(self) -> bool:
        return self._closed

    @property
    def status_text(self) -> Optional[str]:
        return CUSTOM_SERVER_STATUS if self.config.is_using_custom_server() else None

    def set_input(self, text: str) -> None:
        """Edit the candidate URL; any displayed error is dismissed."""
        self.input_url = text
        self.error = None

    def close(self) -> None:
        """Unmount the screen. Results that arrive afterwards are ignored."""
        self._closed = True

    def _transition(self, state: ScreenState) -> None:
        self.state = state
        if self.on_state_change:
            self.on_state_change(state)

    async def handle_save(self) -> ScreenOutcome:
        if self._closed:
            return ScreenOutcome.ABANDONED
        if self.state != ScreenState.IDLE:
            logger.debug(f"Save ignored while {self.state.value}")
            return ScreenOutcome.BUSY

        # Validated, probed and stored in the same trimmed form
        candidate = self.input_url.strip()
        if not candidate:
            self.error = ENTER_URL_MESSAGE
            return ScreenOutcome.INVALID

        validation = validate_server_url(candidate)
        if not validation.valid:
            logger.debug(f"Rejected {candidate!r}: {validation.error.value}")
            self.error = validation.message
            return ScreenOutcome.INVALID

        self.error = None
        self._transition(ScreenState.PROBING)
        try:
            result = await self.prober(candidate)
        except Exception:
            if not self._closed:
                self._transition(ScreenState.IDLE)
            raise

        if self._closed:
            logger.debug(f"Discarding probe result for {candidate!r}, screen closed")
            return ScreenOutcome.ABANDONED

        if not result.ok:
            self.error = result.message
            self._transition(ScreenState.IDLE)
            return ScreenOutcome.PROBE_FAILED

        self._transition(ScreenState.CONFIRM_PENDING)
        try:
            confirmed = await self.confirm(CHANGE_SERVER_TITLE, CHANGE_SERVER_MESSAGE)
            if self._closed:
                return ScreenOutcome.ABANDONED
            if not confirmed:
                logger.debug("Server change declined")
                return ScreenOutcome.DECLINED
            self.config.set_custom_url(candidate)
            return ScreenOutcome.SAVED
        finally:
            if not self._closed:
                self._transition(ScreenState.IDLE)

    async def handle_reset(self) -> ScreenOutcome:
        if self._closed:
            return ScreenOutcome.ABANDONED
        if self.state != ScreenState.IDLE:
            logger.debug(f"Reset ignored while {self.state.value}")
            return ScreenOutcome.BUSY

        self._transition(ScreenState.CONFIRM_PENDING)
        try:
            confirmed = await self.confirm(RESET_SERVER_TITLE, RESET_SERVER_MESSAGE)
            if self._closed:
                return ScreenOutcome.ABANDONED
            if not confirmed:
                return ScreenOutcome.DECLINED
            self.config.set_custom_url(None)
            self.input_url = ""
            self.error = None
            return ScreenOutcome.RESET
        finally:
            if not self._closed:
                self._transition(ScreenState.IDLE)
