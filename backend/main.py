import argparse
import json
import logging
import random
from typing import Any, Dict

from config import get_settings
from domain.engine import SnakeEngine
from domain.game_state import GameState
from players.variant_registry import AVAILABLE_VARIANTS, get_player_class
from services.ticker import GameTicker, resolve_speed

logger = logging.getLogger(__name__)


# -------------------------------
# Session Function
# -------------------------------

def run_session(params: argparse.Namespace) -> Dict[str, Any]:
    """
    Plays one game with a player variant steering the snake.

    Args:
        params: An object (like argparse.Namespace) containing session settings
                (grid_size, speed, player, max_rounds, seed, headless,
                show_board, video).

    Returns:
        A dictionary summarizing the session (game_id, score, rounds,
        snake_length, death_reason, status).
    """
    seed = getattr(params, 'seed', None)
    rng = random.Random(seed) if seed is not None else random.Random()

    engine = SnakeEngine(
        grid_size=params.grid_size,
        speed_ms=resolve_speed(params.speed),
        rng=rng,
        record_history=bool(getattr(params, 'video', None)),
        game_id=getattr(params, 'game_id', None)
    )
    player = get_player_class(params.player)(rng=rng)
    max_rounds = params.max_rounds

    def feed_input(state: GameState) -> None:
        engine.set_direction(player.get_move(state))

    def show_board(state: GameState) -> None:
        print(f"\nRound {state.round_number} | Score {state.score} | {state.status}")
        print(state.print_board())

    ticker = GameTicker(
        engine,
        before_tick=feed_input,
        on_tick=show_board if getattr(params, 'show_board', False) else None
    )

    if getattr(params, 'headless', False):
        while not engine.is_over and engine.round_number < max_rounds:
            ticker.step()
    else:
        def enforce_round_limit(state: GameState) -> None:
            if state.round_number >= max_rounds:
                logger.info(f"Reached max rounds ({max_rounds}), stopping ticker")
                ticker.stop()

        ticker.add_listener(enforce_round_limit)
        ticker.start()
        try:
            ticker.join()
        except KeyboardInterrupt:
            logger.info("Interrupted, stopping ticker")
            ticker.stop()
        if ticker.error is not None:
            raise ticker.error

    final_state = engine.get_current_state()

    video_path = getattr(params, 'video', None)
    if video_path:
        from services.frame_renderer import SnakeFrameRenderer
        SnakeFrameRenderer().generate_video(engine.history, video_path)

    logger.info(
        f"Session {engine.game_id} finished: score {final_state.score}, "
        f"{final_state.round_number} rounds, status {final_state.status}"
    )

    return {
        "game_id": engine.game_id,
        "score": final_state.score,
        "rounds": final_state.round_number,
        "snake_length": len(final_state.snake),
        "death_reason": final_state.death_reason,
        "status": final_state.status
    }


# -------------------------------
# Main Entry Point
# -------------------------------
def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()

    parser = argparse.ArgumentParser(
        description="Run a single-player Snake game driven by a built-in player."
    )
    parser.add_argument("--grid-size", type=int, default=settings.grid_size,
                        help="Width and height of the board in cells")
    parser.add_argument("--speed", type=str, default=str(settings.speed_ms),
                        help="Tick interval: slow, medium, fast or a number of milliseconds")
    parser.add_argument("--player", type=str, default=settings.player,
                        choices=AVAILABLE_VARIANTS,
                        help="Player variant steering the snake")
    parser.add_argument("--max-rounds", type=int, default=settings.max_rounds,
                        help="Stop after this many ticks if the snake is still alive")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement and player choices")
    parser.add_argument("--headless", action="store_true",
                        help="Tick as fast as possible instead of on the real-time ticker")
    parser.add_argument("--show-board", action="store_true",
                        help="Print the board after every tick")
    parser.add_argument("--video", type=str, default=None,
                        help="Write an MP4 replay of the session to this path")
    return parser


def main():
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    parser = build_parser()
    args = parser.parse_args()

    if args.max_rounds <= 0:
        parser.error("--max-rounds must be positive")

    try:
        result = run_session(args)
    except ValueError as exc:
        parser.error(str(exc))

    print("\nSession Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
