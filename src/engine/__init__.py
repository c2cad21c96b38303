"""Game engine components."""

from .combat import resolve_enemy_attack, resolve_phaser_damage, resolve_torpedo_damage
from .command_parser import CommandParser, ParsedCommand
from .commands import Command, CommandContext, default_commands
from .controller import TURN_CONSUMING_VERBS, DispatchResult, GameController
from .scenario import create_default_game
from .victory import MissionOutcome, evaluate_outcome

__all__ = [
    "Command",
    "CommandContext",
    "CommandParser",
    "DispatchResult",
    "GameController",
    "MissionOutcome",
    "ParsedCommand",
    "TURN_CONSUMING_VERBS",
    "create_default_game",
    "default_commands",
    "evaluate_outcome",
    "resolve_enemy_attack",
    "resolve_phaser_damage",
    "resolve_torpedo_damage",
]
