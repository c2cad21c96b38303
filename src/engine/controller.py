"""Command dispatch and turn sequencing.

This module coordinates one player action:
1. Parse the input line into a verb and arguments
2. Look up and execute the matching command
3. For turn-consuming actions (NAV, PHA, TOR) that executed:
   a. Enemy turn: every surviving enemy fires once
   b. Turn advance: stardate +1, turns remaining -1
   c. Alert condition re-evaluation
4. Render request to observers, regardless of outcome
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from ..models.game import GameEvent, GameState
from ..utils.rng import GameRNG
from .combat import resolve_enemy_attack, resolve_phaser_damage, resolve_torpedo_damage
from .command_parser import CommandParser
from .commands import Command, CommandContext, UnknownCommand, default_commands
from .victory import MissionOutcome, evaluate_outcome

logger = logging.getLogger(__name__)

# Verbs that cost a turn (and trigger enemy return fire) when they execute
TURN_CONSUMING_VERBS = frozenset({"NAV", "PHA", "TOR"})


@dataclass
class DispatchResult:
    """What happened to one input line.

    Attributes:
        verb: Name of the command that ran ("UNKNOWN" for unrecognized verbs)
        executed: Whether the command accepted its input
        turn_consumed: Whether the enemy turn and turn advance ran
    """

    verb: str
    executed: bool
    turn_consumed: bool


class GameController:
    """Routes player input to commands and runs the turn sequence.

    The controller owns the command registry and the quit flag. It never
    raises for bad player input; rejected commands simply do not consume a
    turn.
    """

    def __init__(
        self,
        game: GameState,
        rng: GameRNG,
        commands: Optional[List[Command]] = None,
    ):
        """Initialize controller.

        Args:
            game: State to drive
            rng: Random source shared with the scenario
            commands: Verb set to register (defaults to the standard set)
        """
        self.game = game
        self.rng = rng
        self.parser = CommandParser()
        self.unknown_command = UnknownCommand()
        self.command_map: Dict[str, Command] = {}
        self.should_quit = False

        for command in commands if commands is not None else default_commands():
            self.register_command(command)

    def register_command(self, command: Command) -> None:
        self.command_map[command.name] = command

    def command_names(self) -> List[str]:
        """Registered verbs in alphabetical order."""
        return sorted(self.command_map)

    def command_descriptions(self) -> List[tuple[str, str]]:
        return [(name, self.command_map[name].description) for name in self.command_names()]

    def request_quit(self) -> None:
        self.should_quit = True

    def can_continue(self) -> bool:
        return not self.should_quit and not self.game.is_game_over()

    def outcome(self) -> Optional[MissionOutcome]:
        """Mission outcome, or None while play can continue."""
        return evaluate_outcome(self.game, self.should_quit)

    def dispatch(self, line: str) -> Optional[DispatchResult]:
        """Process one line of player input.

        Args:
            line: Raw input line

        Returns:
            DispatchResult, or None for blank input (nothing dispatched)
        """
        parsed = self.parser.parse(line)
        if parsed.is_empty:
            return None

        command = self.command_map.get(parsed.verb, self.unknown_command)
        context = CommandContext(
            game=self.game,
            phaser_damage=resolve_phaser_damage,
            torpedo_damage=resolve_torpedo_damage,
            rng=self.rng,
            controller=self,
        )

        executed = command.execute(context, parsed.args)
        turn_consumed = executed and command.name in TURN_CONSUMING_VERBS
        logger.debug("Dispatched %s %s: executed=%s", command.name, parsed.args, executed)

        if turn_consumed:
            self.run_enemy_turn()
            self.game.advance_turn()
            self.game.evaluate_ship_condition()

        self.game.notify(GameEvent.RENDER_REQUESTED, "POST_COMMAND")

        if not self.can_continue():
            logger.info(
                "Game over at stardate %d (condition %s, %d hostiles, %d turns left, quit=%s)",
                self.game.stardate,
                self.game.ship.condition.value,
                self.game.alive_enemy_count(),
                self.game.turns_remaining,
                self.should_quit,
            )

        return DispatchResult(verb=command.name, executed=executed, turn_consumed=turn_consumed)

    def run_enemy_turn(self) -> None:
        """Every enemy alive at the start of the pass fires once.

        Shots land in sector order. The pass stops as soon as the ship is
        destroyed.
        """
        game = self.game
        attackers = game.sector.alive_enemies()
        if not attackers:
            game.add_message("Sector clear of enemy threats.")
            return

        for enemy in attackers:
            damage = resolve_enemy_attack(enemy, game.ship, self.rng)
            game.ship.apply_damage(damage)
            game.add_message(f"Klingon #{enemy.id} fires for {damage} damage.")
            logger.debug(
                "Klingon #%d fired for %d (shields %d, energy %d)",
                enemy.id,
                damage,
                game.ship.shields,
                game.ship.energy,
            )

            if game.ship.is_destroyed:
                game.add_message("The Enterprise has been destroyed.")
                break
