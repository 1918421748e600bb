"""
Fixed-interval ticker that drives a SnakeEngine.

The ticker runs on a daemon thread and calls engine.tick() every speed_ms
milliseconds, one tick at a time. It stops on its own once a tick ends the
game. The interval can be changed while running; the new value applies from
the next wait.
"""

import logging
import threading
from typing import Callable, List, Optional

from domain.constants import MIN_SPEED_MS, SPEED_PRESETS, SPEED_STEP_MS
from domain.engine import SnakeEngine, validate_speed_ms
from domain.game_state import GameState

logger = logging.getLogger(__name__)

TickListener = Callable[[GameState], None]


def resolve_speed(speed) -> int:
    """
    Turn a preset name ('slow', 'medium', 'fast') or a number of
    milliseconds into a tick interval.

    Raises:
        ValueError: for unknown presets or non-positive intervals.
    """
    if isinstance(speed, str):
        key = speed.strip().lower()
        if key in SPEED_PRESETS:
            return SPEED_PRESETS[key]
        if key.isdigit():
            return validate_speed_ms(int(key))
        available = ", ".join(SPEED_PRESETS)
        raise ValueError(f"Unknown speed preset '{speed}'. Available presets: {available}")
    return validate_speed_ms(speed)


class GameTicker:
    """
    Calls engine.tick() on a fixed cadence.

    before_tick receives the snapshot taken just before each tick, which is
    where an input source can latch its next direction. Listeners receive the
    snapshot returned by each tick.
    """

    def __init__(
        self,
        engine: SnakeEngine,
        speed_ms: Optional[int] = None,
        before_tick: Optional[TickListener] = None,
        on_tick: Optional[TickListener] = None
    ):
        self.engine = engine
        self.before_tick = before_tick
        self.listeners: List[TickListener] = [on_tick] if on_tick else []
        self.ticks = 0
        self.error: Optional[BaseException] = None
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

        if speed_ms is not None:
            self.set_speed(speed_ms)

    @property
    def speed_ms(self) -> int:
        return self.engine.speed_ms

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def add_listener(self, listener: TickListener) -> None:
        self.listeners.append(listener)

    def set_speed(self, speed_ms) -> None:
        """Change the cadence without resetting the game."""
        speed_ms = resolve_speed(speed_ms)
        self.engine.set_speed(speed_ms)
        logger.debug(f"Tick interval set to {speed_ms} ms")

    def set_preset(self, preset: str) -> None:
        if preset not in SPEED_PRESETS:
            available = ", ".join(SPEED_PRESETS)
            raise ValueError(f"Unknown speed preset '{preset}'. Available presets: {available}")
        self.set_speed(SPEED_PRESETS[preset])

    def faster(self) -> int:
        self.set_speed(max(MIN_SPEED_MS, self.speed_ms - SPEED_STEP_MS))
        return self.speed_ms

    def slower(self) -> int:
        self.set_speed(self.speed_ms + SPEED_STEP_MS)
        return self.speed_ms

    def step(self) -> GameState:
        """
        Run a single tick with its hooks, on the calling thread.
        """
        if self.before_tick is not None:
            self.before_tick(self.engine.get_current_state())

        state = self.engine.tick()
        self.ticks += 1

        for listener in self.listeners:
            listener(state)
        return state

    def start(self) -> None:
        if self.is_running:
            raise RuntimeError("Ticker is already running.")
        if self.engine.is_over:
            raise RuntimeError("Cannot start a ticker on a finished game; reset the engine first.")

        self._stop_event.clear()
        self.error = None
        self._thread = threading.Thread(
            target=self._run,
            name=f"snake-ticker-{self.engine.game_id[:8]}",
            daemon=True
        )
        self._thread.start()
        logger.info(f"Ticker started at {self.speed_ms} ms per tick")

    def stop(self, timeout: Optional[float] = None) -> None:
        """
        Ask the ticker to stop and wait for the tick in progress to finish.
        """
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    def _run(self) -> None:
        try:
            while not self._stop_event.wait(self.speed_ms / 1000.0):
                state = self.step()
                if state.is_over:
                    logger.info(f"Ticker stopping: game over after {self.ticks} ticks")
                    break
        except Exception as exc:
            self.error = exc
            logger.exception(f"Ticker stopped after an error: {exc}")
        finally:
            self._stop_event.set()
