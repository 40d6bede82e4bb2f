"""
Pacsnek game engine.

update() is the single per-tick entry point: the driving loop owns one
GameState, feeds it one TickInput per tick and gets back the state to keep
(a brand-new one after a restart). run_session() is a headless driving loop
used by the command line tools and the tests.
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from config import configure_logging, get_level_path
from domain.constants import (
    ENEMY_BONUS, FOOD_SCORE, MOVE_INTERVAL, POWERUP_TIME, START_BLINK_PERIOD, STILL,
)
from domain.game_state import GameState, GameStatus, Snapshot, TickInput
from domain.level import read_level_source
from players.base import Player
from players.enemy_ai import next_position
from players.random_player import RandomPlayer
from players.scripted_player import ScriptedPlayer
from services.viewport import follow_head

logger = logging.getLogger(__name__)


def new_game_state(level_source: str, status: GameStatus = GameStatus.START) -> GameState:
    """
    Build a fresh session from raw level text.

    Raises:
        LevelError: If the level is malformed or not completable.
    """
    return GameState.from_source(level_source, status=status)


def update(state: GameState, tick_input: TickInput) -> GameState:
    """
    Advance the session by one tick.

    Returns:
        The state to keep driving: state itself, or a new GameState when a
        finished game was restarted.
    """
    if state.status is GameStatus.START:
        _update_start(state, tick_input)
    elif state.status is GameStatus.PLAYING:
        _update_playing(state, tick_input)
    else:
        state = _update_end(state, tick_input)
    state.ticks += 1
    return state


def _update_start(state: GameState, tick_input: TickInput) -> None:
    if tick_input.start:
        state.status = GameStatus.PLAYING
        logger.info("Game started")
    state.start_blink_counter = (state.start_blink_counter + 1) % START_BLINK_PERIOD


def _update_playing(state: GameState, tick_input: TickInput) -> None:
    # Input is sampled every tick even though the snake only moves every MOVE_INTERVAL
    if tick_input.direction is not None:
        state.snake.steer(tick_input.direction)

    if state.snake.advance_frame():
        run_movement_cycle(state)

    # Counts down after the cycle, so a timer of 1 still covers this move
    if state.power_up_ticks > 0:
        state.power_up_ticks -= 1


def _update_end(state: GameState, tick_input: TickInput) -> GameState:
    if not tick_input.restart:
        return state
    logger.info("Restarting game")
    return new_game_state(state.level_source, status=GameStatus.PLAYING)


def run_movement_cycle(state: GameState) -> None:
    """
    Move the snake one cell, then every enemy, then scroll the viewport.
    A game-ending event skips whatever is left of the cycle.
    """
    if not _move_snake(state):
        return
    if not _move_enemies(state):
        return
    state.viewport_x = follow_head(state.viewport_x, state.snake.head.x, state.level.width)


def _end_game(state: GameState, status: GameStatus, reason: str) -> None:
    state.status = status
    logger.info(f"Game over ({status.value}): {reason}. Score: {state.score}")


def _move_snake(state: GameState) -> bool:
    """Returns False if the move ended the game."""
    snake, level = state.snake, state.level

    snake.commit_direction()
    if snake.direction == STILL:
        # Waiting for the first direction
        return True

    new_head = snake.next_head(level.width, level.height)

    if level.is_wall(new_head):
        _end_game(state, GameStatus.LOST, f"hit a wall at {tuple(new_head)}")
        return False
    if snake.hits_body(new_head):
        _end_game(state, GameStatus.LOST, f"ran into itself at {tuple(new_head)}")
        return False

    snake.prepend(new_head)

    if new_head == level.exit:
        _end_game(state, GameStatus.WON, "reached the exit")
        return False

    if level.eat(new_head):
        state.score += FOOD_SCORE
        state.power_up_ticks = POWERUP_TIME
        logger.debug(f"Ate food at {tuple(new_head)}, {len(level.foods)} left")
    else:
        snake.remove_last_segment()

    return True


def _move_enemies(state: GameState) -> bool:
    """Returns False if an enemy caught the snake."""
    head = state.snake.head
    powered = state.power_up_active

    i = 0
    while i < len(state.enemies):
        enemy = state.enemies[i]
        enemy.position = next_position(state.level, enemy.position, head, evading=powered)

        if enemy.position != head:
            i += 1
            continue

        if powered:
            del state.enemies[i]
            state.score += ENEMY_BONUS
            logger.debug(f"Ate enemy at {tuple(head)}, {len(state.enemies)} left")
            continue

        _end_game(state, GameStatus.LOST, f"caught by an enemy at {tuple(head)}")
        return False

    return True


# -------------------------------
# Session Runner
# -------------------------------

def run_session(
    player: Player,
    level_source: str,
    max_ticks: int = 10_000,
    record_every: Optional[int] = None
) -> Dict[str, Any]:
    """
    Drive one session headlessly until it ends or max_ticks is reached.

    Args:
        player: Input source asked once per tick
        level_source: Raw level text
        max_ticks: Upper bound on ticks
        record_every: If set, keep a snapshot every N ticks (plus the last one)

    Returns:
        A dictionary summarizing the session (status, score, length, ticks,
        foods_left, enemies_left, final_board) and the recorded history.
    """
    state = new_game_state(level_source)
    history: List[Snapshot] = []

    while state.ticks < max_ticks and not state.status.is_over:
        snapshot = state.snapshot()
        if record_every and state.ticks % record_every == 0:
            history.append(snapshot)
        state = update(state, player.get_input(snapshot))

    final = state.snapshot()
    if record_every:
        history.append(final)

    logger.info(f"Session finished after {state.ticks} ticks: {state!r}")

    return {
        "status": state.status.value,
        "score": state.score,
        "length": len(state.snake),
        "ticks": state.ticks,
        "foods_left": len(state.level.foods),
        "enemies_left": len(state.enemies),
        "final_board": final.print_board(),
        "history": history,
    }


def build_player(args: argparse.Namespace) -> Player:
    if args.moves:
        return ScriptedPlayer(args.moves)
    return RandomPlayer(seed=args.seed)


def add_session_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--level", type=str, required=False, default=None,
                        help="Path to the level file (default: PACSNEK_LEVEL or the bundled level)")
    parser.add_argument("--moves", type=str, nargs='+', required=False,
                        help="Scripted directions, one per movement cycle (e.g. 'R R D D L')")
    parser.add_argument("--seed", type=int, required=False, default=None,
                        help="Seed for the random autopilot when no moves are given")
    parser.add_argument("--max-ticks", type=int, required=False, default=3000,
                        help="Stop after this many ticks")


# -------------------------------
# Main Entry Point
# -------------------------------
def main():
    parser = argparse.ArgumentParser(
        description="Run a headless Pacsnek session and print the outcome."
    )
    add_session_arguments(parser)
    parser.add_argument("--record-every", type=int, required=False, default=MOVE_INTERVAL,
                        help="Print the board every N ticks with --verbose")
    parser.add_argument("--verbose", action="store_true",
                        help="Print the recorded boards as the session progresses")
    args = parser.parse_args()

    configure_logging()

    level_path = args.level or get_level_path()
    try:
        level_source = read_level_source(level_path)
        result = run_session(
            build_player(args),
            level_source,
            max_ticks=args.max_ticks,
            record_every=args.record_every if args.verbose else None
        )
    except ValueError as e:  # LevelError or a bad --moves entry
        logger.error(f"Error: {e}")
        sys.exit(1)

    for snapshot in result.pop("history"):
        print("\n" + snapshot.print_board() + "\n")

    print(result.pop("final_board"))
    print("\nSession Result Summary:")
    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
