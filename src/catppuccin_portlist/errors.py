from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_CONFIG, ERR_INTERNAL, ERR_IO, ERR_NETWORK, ERR_SECTION, ERR_VALIDATION


@dataclass
class ScriptError(Exception):
    message: str
    code: int = ERR_INTERNAL
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


@dataclass
class LoadError(ScriptError):
    code: int = ERR_IO
    kind: str = "io_error"


@dataclass
class NetworkError(ScriptError):
    code: int = ERR_NETWORK
    kind: str = "network_error"


@dataclass
class SchemaValidationError(ScriptError):
    code: int = ERR_VALIDATION
    kind: str = "validation_error"


@dataclass
class ConfigurationError(ScriptError):
    code: int = ERR_CONFIG
    kind: str = "configuration_error"


@dataclass
class SectionNotFoundError(ScriptError):
    code: int = ERR_SECTION
    kind: str = "section_not_found"
