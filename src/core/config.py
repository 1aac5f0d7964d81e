"""Settings for the console front end"""

from typing import Mapping, Self

from pydantic import BaseModel, field_validator

from src.chess.moves import MOVE_TOKEN_LENGTH
from src.chess.square import is_square_name
from src.core.exceptions import ConfigError

ENV_PREFIX = "RCHESS_"
TRUTHY = {"1", "true", "yes", "on"}
FALSY = {"0", "false", "no", "off"}


class ConsoleSettings(BaseModel):
    banner: str = "Welcome to rchess!"
    success_message: str = "Done!"
    failure_message: str = "Invalid move"
    exit_commands: list[str] = ["exit", "quit"]
    clear_screen: bool = True
    prompt: str = ""

    @field_validator("exit_commands")
    @classmethod
    def validate_exit_commands(cls, value: list[str]) -> list[str]:
        commands = [command.strip() for command in value if command.strip()]
        if not commands:
            raise ConfigError("At least one exit command is required.")

        # an exit command that is also a move could never be played
        for command in commands:
            if len(command) == MOVE_TOKEN_LENGTH and all(
                is_square_name(command[i : i + 2]) for i in (0, 2)
            ):
                raise ConfigError(
                    f"Exit command {command!r} would shadow a move."
                )
        return commands

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> Self:
        """Only the variables that are actually set override the defaults"""
        overrides: dict[str, object] = {}
        if f"{ENV_PREFIX}BANNER" in environ:
            overrides["banner"] = environ[f"{ENV_PREFIX}BANNER"]
        if f"{ENV_PREFIX}EXIT_COMMANDS" in environ:
            overrides["exit_commands"] = environ[f"{ENV_PREFIX}EXIT_COMMANDS"].split(",")
        if f"{ENV_PREFIX}CLEAR_SCREEN" in environ:
            overrides["clear_screen"] = _parse_flag(
                f"{ENV_PREFIX}CLEAR_SCREEN", environ[f"{ENV_PREFIX}CLEAR_SCREEN"]
            )
        return cls(**overrides)


def _parse_flag(name: str, value: str) -> bool:
    normalized = value.strip().lower()
    if normalized in TRUTHY:
        return True
    if normalized in FALSY:
        return False
    raise ConfigError(f"Cannot interpret {name}={value!r} as on/off.")
