"""Front-end agnostic event loop: render, poll, dispatch."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from tuichess.game.interfaces import InputKey
from tuichess.ui.projection import Frame, build_frame

if TYPE_CHECKING:
    from tuichess.game.controller import SelectionController

_LOGGER = logging.getLogger(__name__)

DEFAULT_POLL_TIMEOUT_MS = 100


class IInputSource(ABC):
    """Interface for a source of decoded key events."""

    @abstractmethod
    def poll(self, timeout_ms: int) -> InputKey | None:
        """Wait at most *timeout_ms* for a key; ``None`` when nothing arrived."""


class IRenderer(ABC):
    """Interface for something that draws frames. Must not touch game state."""

    @abstractmethod
    def render(self, frame: Frame) -> None: ...


def run_loop(
    controller: SelectionController,
    source: IInputSource,
    renderer: IRenderer,
    *,
    poll_timeout_ms: int = DEFAULT_POLL_TIMEOUT_MS,
    unicode: bool = True,
) -> int:
    """Run until QUIT. Returns the number of keys handed to the controller.

    Errors raised by *source* or *renderer* propagate to the caller,
    which is responsible for tearing the terminal down.
    """
    handled = 0
    while True:
        renderer.render(build_frame(controller, unicode=unicode))
        key = source.poll(poll_timeout_ms)
        if key is None:
            continue
        if key == InputKey.QUIT:
            _LOGGER.info("Quit requested after %d keys", handled)
            return handled
        controller.handle(key)
        handled += 1
