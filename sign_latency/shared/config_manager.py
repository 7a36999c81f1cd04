"""Loads and validates the run configuration.

Validation happens once, before any HTTP client is constructed, so a
misconfigured run never touches the network.
"""

from typing import List, Optional

from pydantic import ValidationError

from sign_latency.const import DEFAULT_ENV_FILE, REQUIRED_ENV_VARS, OPTIONAL_ENV_VARS
from .config import Config
from .logging import LoggingManager

logger = LoggingManager.get_logger(__name__)

# pydantic error types that mean "the value was not provided"
_MISSING_ERROR_TYPES = {"missing", "string_too_short"}


class ConfigurationError(Exception):
    """Exception raised for configuration-related errors."""

    def __init__(self, message: str, missing: Optional[List[str]] = None,
                 invalid: Optional[List[str]] = None,
                 cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.missing = missing or []
        self.invalid = invalid or []
        self.cause = cause

    def format_help(self) -> str:
        """Render the error with the list of required and optional variables."""
        lines = [f"Missing required env var: {name}" for name in self.missing]
        lines.extend(self.invalid)
        lines.append("")
        lines.append("Required:")
        lines.extend(f"  {name}" for name in REQUIRED_ENV_VARS)
        lines.append("")
        lines.append("Optional:")
        lines.extend(f"  {name:<22} {hint}" for name, hint in OPTIONAL_ENV_VARS.items())
        return "\n".join(lines)


def load_config(env_file: Optional[str] = DEFAULT_ENV_FILE, **overrides) -> Config:
    """
    Build the run configuration from the environment.

    Args:
        env_file: Dotenv file to read in addition to the environment. None disables it.
        **overrides: Field values passed straight to Config.

    Returns:
        The validated, immutable Config.

    Raises:
        ConfigurationError: If a required value is absent or an optional one is invalid.
    """
    try:
        return Config(_env_file=env_file, **overrides)
    except ValidationError as e:
        missing, invalid = _classify_errors(e)
        logger.debug(f"Configuration validation failed: {e}")
        raise ConfigurationError(
            "Invalid configuration",
            missing=missing,
            invalid=invalid,
            cause=e,
        ) from e


def _classify_errors(error: ValidationError) -> tuple:
    """Split validation errors into missing variable names and invalid value messages."""
    env_names = {}
    for field_name, field in Config.model_fields.items():
        alias = field.validation_alias if isinstance(field.validation_alias, str) else field_name
        env_names[field_name] = alias
        env_names[alias] = alias

    missing, invalid = [], []
    for err in error.errors():
        key = str(err["loc"][0]) if err["loc"] else ""
        name = env_names.get(key, key)
        if err["type"] in _MISSING_ERROR_TYPES:
            missing.append(name)
        else:
            invalid.append(f"Invalid value for {name}: {err['msg']}")

    # Report in the documented order
    order = {name: i for i, name in enumerate(REQUIRED_ENV_VARS)}
    missing.sort(key=lambda name: order.get(name, len(order)))
    return missing, invalid
