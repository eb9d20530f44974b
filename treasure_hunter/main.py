"""
Treasure Hunter - Main Entry Point

Builds a hunter, a shop and the first town, then drives the game one
command per turn until the hunter wins, goes broke or gives up.

This module provides the main entry point and the TreasureHunterGame class
that coordinates the town, the hunter and the shop.
"""

import argparse
import logging
from dataclasses import dataclass
from typing import Callable, Optional

from treasure_hunter.data_models import (
    DiceRoller,
    Difficulty,
    DIFFICULTY_TOUGHNESS,
)
from treasure_hunter.hunter import Hunter
from treasure_hunter.rng import RandomSource
from treasure_hunter.shop import Shop
from treasure_hunter.town import Town, TownActionResult, build_town_snapshot


# Configure logging
def setup_logging(verbose: bool = False) -> None:
    """
    Configure logging based on verbosity level.

    Quiet runs log at WARNING rather than INFO so log lines do not
    interleave with the game text on the same terminal.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


logger = logging.getLogger(__name__)


# =============================================================================
# CONFIGURATION
# =============================================================================

@dataclass
class GameConfig:
    """Configuration for a game session."""

    hunter_name: str = "Hunter"
    difficulty: Difficulty = Difficulty.NORMAL
    starting_gold: int = 10

    # Seed for the DiceRoller; None leaves the run unseeded
    seed: Optional[int] = None

    # Runtime options
    verbose: bool = False

    def __post_init__(self):
        """Accept difficulty names as plain strings."""
        if isinstance(self.difficulty, str) and not isinstance(self.difficulty, Difficulty):
            try:
                self.difficulty = Difficulty(self.difficulty.lower())
            except ValueError:
                raise ValueError(f"Unknown difficulty: {self.difficulty}") from None
        if self.starting_gold < 0:
            raise ValueError(f"Starting gold cannot be negative: {self.starting_gold}")

    @property
    def toughness(self) -> float:
        return DIFFICULTY_TOUGHNESS[self.difficulty]

    @property
    def effective_starting_gold(self) -> int:
        """Easy mode starts the hunter with twice the gold."""
        if self.difficulty == Difficulty.EASY:
            return self.starting_gold * 2
        return self.starting_gold


# =============================================================================
# GAME
# =============================================================================

MENU = """
What's your next move?
(B)uy something at the shop.
(S)ell something at the shop.
(M)ove on to a different town.
(L)ook for trouble!
(D)ig for gold.
(H)unt for treasure.
Give up the hunt and e(X)it."""


class TreasureHunterGame:
    """
    Drives one hunter from town to town.

    Commands are single letters, optionally followed by an item for the
    shop: "b rope", "s boat", "m", "l", "d", "h", "x".
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        shop: Optional[Shop] = None,
        rng: Optional[RandomSource] = None,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        """
        Initialize the game.

        Args:
            config: Game configuration (defaults to GameConfig())
            shop: Shop shared by every town
            rng: Random source handed to every town; defaults to the
                DiceRoller-backed adapter
            input_fn: Reads one command; replaced in tests
            output_fn: Writes one message; replaced in tests
        """
        self.config = config or GameConfig()
        if self.config.seed is not None:
            DiceRoller.set_seed(self.config.seed)

        self.shop = shop or Shop()
        self._rng = rng
        self._input = input_fn
        self._output = output_fn

        self.hunter = Hunter(
            name=self.config.hunter_name,
            gold=self.config.effective_starting_gold,
        )
        self.towns_visited = 0
        self.game_over = False
        self.won = False
        # Town events drained during the last turn, oldest first
        self.last_events: list[dict] = []
        self.town = self._new_town()
        self._drain_events(self.town)

    def _new_town(self) -> Town:
        town = Town(self.shop, self.config.toughness, rng=self._rng)
        town.hunter_arrives(self.hunter)
        self.towns_visited += 1
        logger.info(f"Town #{self.towns_visited}: {town.terrain.name}")
        return town

    def status(self) -> str:
        return f"{self.town.info_string()}\n{self.hunter.info_string()}"

    def execute(self, command: str) -> str:
        """
        Run one command and return the message to show the player.

        Args:
            command: Player input, e.g. "b shovel" or "l"

        Returns:
            Narrative message for the turn
        """
        self.last_events = []
        message = self._dispatch(command)
        self._drain_events(self.town)
        if self.config.verbose:
            logger.debug(f"Town snapshot: {build_town_snapshot(self.town)}")
        return message

    def _drain_events(self, town: Town) -> None:
        for event in town.events.flush():
            logger.debug(f"Town event {event['type']}: {event['payload']}")
            self.last_events.append(event)

    def _dispatch(self, command: str) -> str:
        parts = command.strip().split(maxsplit=1)
        if not parts:
            return "Yikes! That's an invalid option! Try again."
        verb = parts[0].lower()
        arg = parts[1] if len(parts) > 1 else ""

        if verb in ("b", "buy"):
            return self.town.enter_shop(f"buy {arg}").message
        if verb in ("s", "sell"):
            return self.town.enter_shop(f"sell {arg}").message
        if verb == "m":
            return self._move_on()
        if verb == "l":
            return self._look_for_trouble()
        if verb == "d":
            return self.town.dig_for_gold().message
        if verb == "h":
            return self._hunt_for_treasure()
        if verb == "x":
            self.game_over = True
            return f"Fare thee well, {self.hunter.name}!"
        return "Yikes! That's an invalid option! Try again."

    def _move_on(self) -> str:
        result = self.town.leave_town()
        if not result.success:
            return result.message
        self._drain_events(self.town)
        self.town = self._new_town()
        return f"{result.message}\n{self.town.get_latest_news()}"

    def _look_for_trouble(self) -> str:
        result: TownActionResult = self.town.look_for_trouble()
        if result.details.get("won") is False and self.hunter.gold == 0:
            self.game_over = True
            return f"{result.message}\nYou're flat broke. Game over!"
        return result.message

    def _hunt_for_treasure(self) -> str:
        if self.town.get_searched():
            return "You have already searched this town."
        self.town.set_searched(True)

        result = self.town.get_treasure()
        if result.treasure is None:
            return result.message
        if not self.hunter.add_treasure(result.treasure):
            return f"{result.message}\nYou already have a {result.treasure}, so you leave it behind."
        if self.hunter.has_all_treasures():
            self.game_over = True
            self.won = True
            return f"{result.message}\nCongratulations, you have found the last of the three treasures, you win!"
        return result.message

    def run(self) -> bool:
        """
        Play until the game ends.

        Returns:
            True if the hunter collected every treasure
        """
        self._output(f"Welcome to TREASURE HUNTER, {self.hunter.name}!")
        self._output(self.town.get_latest_news())
        while not self.game_over:
            self._output(self.status())
            self._output(MENU)
            try:
                command = self._input("> ")
            except EOFError:
                self._output(f"Fare thee well, {self.hunter.name}!")
                break
            self._output(self.execute(command))
        return self.won


# =============================================================================
# ARGUMENT PARSING
# =============================================================================

def parse_arguments(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Treasure Hunter - find the crown, the trophy and the gem",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m treasure_hunter.main                     # Normal game
  python -m treasure_hunter.main --difficulty easy   # Items never break
  python -m treasure_hunter.main --seed 42           # Reproducible run
        """
    )

    parser.add_argument(
        "--name",
        type=str,
        default="Hunter",
        help="Your hunter's name (default: Hunter)",
    )
    parser.add_argument(
        "--difficulty",
        type=str,
        default=Difficulty.NORMAL.value,
        choices=[d.value for d in Difficulty],
        help="Game difficulty (default: normal)",
    )
    parser.add_argument(
        "--gold",
        type=int,
        default=10,
        help="Starting gold before difficulty bonus (default: 10)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Seed the dice for a reproducible game",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    return parser.parse_args(argv)


def create_config_from_args(args: argparse.Namespace) -> GameConfig:
    """Create GameConfig from parsed arguments."""
    return GameConfig(
        hunter_name=args.name,
        difficulty=Difficulty(args.difficulty),
        starting_gold=args.gold,
        seed=args.seed,
        verbose=args.verbose,
    )


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for CLI usage."""
    args = parse_arguments(argv)
    setup_logging(args.verbose)

    print("=" * 60)
    print("TREASURE HUNTER v0.1.0")
    print("=" * 60)

    config = create_config_from_args(args)
    game = TreasureHunterGame(config)
    game.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
