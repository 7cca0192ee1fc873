"""wkgeo configuration using pydantic-settings.

All configuration is strongly typed and supports environment variables
and .env files.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic_settings import BaseSettings, SettingsConfigDict

if TYPE_CHECKING:
    from wkgeo.io.byte_order import ByteOrder

_BYTE_ORDER_CHOICES = ("native", "big", "little")


class ConfigError(Exception):
    """Raised when a configuration value is invalid.

    Example:
        >>> Settings(WKB_BYTE_ORDER="middle").wkb_byte_order()  # doctest: +ELLIPSIS
        Traceback (most recent call last):
        ...
        ConfigError: Invalid WKB_BYTE_ORDER 'middle'. Expected one of: native, big, little.
    """

    def __init__(self, env_var: str, value: str, choices: tuple[str, ...]) -> None:
        """Initialize configuration error.

        Args:
            env_var: Environment variable holding the bad value.
            value: The rejected value.
            choices: Accepted values.
        """
        self.env_var = env_var
        self.value = value
        self.choices = choices
        message = (
            f"Invalid {env_var} '{value}'. Expected one of: {', '.join(choices)}."
        )
        super().__init__(message)


class Settings(BaseSettings):
    """Library settings loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # Geometry I/O
    DEFAULT_SRID: int = 0  # SRID assumed by the CLI when input carries none
    WKB_BYTE_ORDER: str = "native"  # "native", "big" or "little"

    def wkb_byte_order(self) -> ByteOrder:
        """Resolve WKB_BYTE_ORDER to a ByteOrder.

        Returns:
            The configured byte order; "native" resolves to the machine order.

        Raises:
            ConfigError: If WKB_BYTE_ORDER is not a recognized value.
        """
        from wkgeo.io.byte_order import ByteOrder, machine_byte_order  # noqa: PLC0415

        value = self.WKB_BYTE_ORDER.strip().lower()
        if value == "big":
            return ByteOrder.BIG_ENDIAN
        if value == "little":
            return ByteOrder.LITTLE_ENDIAN
        if value == "native":
            return machine_byte_order()
        raise ConfigError("WKB_BYTE_ORDER", self.WKB_BYTE_ORDER, _BYTE_ORDER_CHOICES)


# Singleton instance for import convenience
settings = Settings()
