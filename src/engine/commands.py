"""Player command set.

Each command validates its own arguments, mutates the game state, writes to
the computer log, and reports whether it executed. Bad input is never raised
to the caller: it is logged as a rejection and the command returns False.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol

from ..models.game import GameEvent, GameState
from ..models.position import Position
from ..utils.constants import NAV_COST_PER_SECTOR, NAV_MIN_COST
from ..utils.rng import GameRNG

logger = logging.getLogger(__name__)

WHOLE_NUMBER = re.compile(r"[+-]?[0-9]+")


class ControllerPort(Protocol):
    """The slice of the controller that commands may call back into."""

    def request_quit(self) -> None: ...

    def command_names(self) -> List[str]: ...

    def command_descriptions(self) -> List[tuple[str, str]]: ...


@dataclass
class CommandContext:
    """Everything a command needs to run."""

    game: GameState
    phaser_damage: Callable[[int, float], int]
    torpedo_damage: Callable[[float, GameRNG], int]
    rng: GameRNG
    controller: ControllerPort


def _parse_int(token: str) -> Optional[int]:
    """Parse a plain ASCII whole number, returning None if the token is not one."""
    if not WHOLE_NUMBER.fullmatch(token):
        return None
    return int(token)


def _parse_coordinates(
    game: GameState, args: List[str], usage: str, label: str
) -> Optional[Position]:
    """Validate an "<x> <y>" argument pair, logging the reason on failure."""
    if len(args) < 2:
        game.add_message(f"Usage: {usage}")
        return None

    x = _parse_int(args[0])
    y = _parse_int(args[1])
    if x is None or y is None:
        game.add_message(f"{label} coordinates must be whole numbers.")
        return None

    if not game.sector.contains(x, y):
        game.add_message(
            f"{label} coordinates must be between 1 and {game.sector.width}."
        )
        return None

    return Position(x, y)


class Command:
    """Base class for a verb the player can issue."""

    name = ""
    description = ""

    def execute(self, context: CommandContext, args: List[str]) -> bool:
        """Run the command.

        Args:
            context: Game state and combat services
            args: Argument tokens following the verb

        Returns:
            True if the command executed, False if it was rejected
        """
        raise NotImplementedError


class NavigateCommand(Command):
    """Move the ship to another cell of the sector."""

    name = "NAV"
    description = "Navigate to sector coordinates: NAV <x> <y>"

    def execute(self, context: CommandContext, args: List[str]) -> bool:
        game = context.game
        ship = game.ship

        target = _parse_coordinates(game, args, "NAV <x> <y>", "Navigation")
        if target is None:
            return False

        if target == ship.position:
            game.add_message("Already at those coordinates.")
            return False

        if game.sector.enemy_at(target) is not None:
            game.add_message("Navigation blocked: hostile vessel occupies that sector.")
            return False

        distance = ship.position.distance_to(target)
        energy_cost = max(NAV_MIN_COST, int(distance * NAV_COST_PER_SECTOR))

        if energy_cost > ship.energy:
            game.add_message(
                f"Insufficient energy for course. Required: {energy_cost}, "
                f"available: {ship.energy}"
            )
            return False

        ship.energy -= energy_cost
        ship.position = target
        game.add_message(
            f"Course laid in. Arrived at X={target.x} Y={target.y}. Energy cost: {energy_cost}"
        )
        return True


class PhaserCommand(Command):
    """Fire phasers at every hostile in the sector at once.

    Energy is split by inverse distance: closer targets get a larger share,
    and each share is then attenuated by range.
    """

    name = "PHA"
    description = "Fire phasers: PHA <energy>"

    def execute(self, context: CommandContext, args: List[str]) -> bool:
        game = context.game
        ship = game.ship

        if game.alive_enemy_count() == 0:
            game.add_message("No targets in range. Quadrant secure.")
            return False

        if len(args) < 1:
            game.add_message("Usage: PHA <energy>")
            return False

        requested_energy = _parse_int(args[0])
        if requested_energy is None:
            game.add_message("Phaser energy must be a whole number.")
            return False

        if requested_energy <= 0:
            game.add_message("Phaser energy must be greater than zero.")
            return False

        if requested_energy > ship.energy:
            game.add_message(f"Insufficient energy. Available: {ship.energy}")
            return False

        targets = game.sector.alive_enemies()
        distances = [max(enemy.position.distance_to(ship.position), 1.0) for enemy in targets]
        weights = [1.0 / distance for distance in distances]
        weight_sum = sum(weights)

        # The full request is spent even if share rounding loses a few units
        ship.energy -= requested_energy
        total_damage = 0

        for enemy, distance, weight in zip(targets, distances, weights):
            share = int(requested_energy * (weight / weight_sum))
            damage = context.phaser_damage(share, distance)
            total_damage += damage

            if enemy.take_damage(damage):
                game.add_message(f"Klingon #{enemy.id} destroyed.")
            else:
                game.add_message(
                    f"Klingon #{enemy.id} hit for {damage}. Hull remaining: {enemy.hull}"
                )

        game.add_message(f"Phaser volley complete. Total damage: {total_damage}")
        logger.debug("Phaser volley: %d energy, %d damage", requested_energy, total_damage)
        game.notify(GameEvent.COMBAT_RESOLVED)
        return True


class TorpedoCommand(Command):
    """Fire a photon torpedo at a single cell."""

    name = "TOR"
    description = "Fire photon torpedo: TOR <x> <y>"

    def execute(self, context: CommandContext, args: List[str]) -> bool:
        game = context.game
        ship = game.ship

        target_cell = _parse_coordinates(game, args, "TOR <x> <y>", "Torpedo")
        if target_cell is None:
            return False

        if ship.torpedoes <= 0:
            game.add_message("No photon torpedoes remaining.")
            return False

        ship.torpedoes -= 1

        target = game.sector.enemy_at(target_cell)
        if target is None:
            # A miss still spends the torpedo and the turn
            game.add_message(f"Photon torpedo misses at X={target_cell.x} Y={target_cell.y}.")
            return True

        distance = target.position.distance_to(ship.position)
        damage = context.torpedo_damage(distance, context.rng)

        if target.take_damage(damage):
            game.add_message(f"Direct hit! Klingon #{target.id} destroyed.")
        else:
            game.add_message(
                f"Direct hit on Klingon #{target.id} for {damage}. Hull remaining: {target.hull}"
            )

        return True


class ShortRangeScanCommand(Command):
    name = "SRS"
    description = "Short range scan"

    def execute(self, context: CommandContext, args: List[str]) -> bool:
        context.game.notify(GameEvent.RENDER_REQUESTED, "SRS")
        return True


class StatusCommand(Command):
    name = "STATUS"
    description = "Show mission status"

    def execute(self, context: CommandContext, args: List[str]) -> bool:
        context.game.notify(GameEvent.RENDER_REQUESTED, "STATUS")
        return True


class HelpCommand(Command):
    name = "HELP"
    description = "List commands"

    def execute(self, context: CommandContext, args: List[str]) -> bool:
        names = ", ".join(context.controller.command_names())
        context.game.add_message(f"Available commands: {names}")
        for name, description in context.controller.command_descriptions():
            context.game.add_message(f"  {name:<7}{description}")
        return True


class QuitCommand(Command):
    name = "QUIT"
    description = "Exit game"

    def execute(self, context: CommandContext, args: List[str]) -> bool:
        context.controller.request_quit()
        context.game.add_message("Starfleet command acknowledged. Ending simulation.")
        return True


class UnknownCommand(Command):
    """Fallback for verbs that are not registered."""

    name = "UNKNOWN"
    description = "Unknown command handler"

    def execute(self, context: CommandContext, args: List[str]) -> bool:
        context.game.add_message("Unknown command. Type HELP for available commands.")
        return False


def default_commands() -> List[Command]:
    """The standard verb set, in registration order."""
    return [
        NavigateCommand(),
        PhaserCommand(),
        TorpedoCommand(),
        ShortRangeScanCommand(),
        StatusCommand(),
        HelpCommand(),
        QuitCommand(),
    ]
