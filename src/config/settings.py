"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use SEMDOC_ prefix (e.g., SEMDOC_HANDLE_APOSTROPHES=false).

Settings can also be loaded from a .env file in the project root.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..models.roff import Apostrophes


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use SEMDOC_ prefix.

    Examples:
        SEMDOC_HANDLE_APOSTROPHES=false
        SEMDOC_ROFF_BULLET=\\(em
        SEMDOC_ORDINAL_SUFFIX=)
    """

    model_config = SettingsConfigDict(
        env_prefix="SEMDOC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # ROFF rendering
    handle_apostrophes: bool = Field(
        default=True,
        description="Emit the apostrophe preamble and portable apostrophes in ROFF output",
    )

    roff_bullet: str = Field(
        default="\\(bu",
        description="ROFF escape written before unnumbered list items",
    )

    ordinal_suffix: str = Field(
        default=".",
        description="Text written after the number of a numbered list item",
    )

    # Diagnostics
    debug_mode: bool = Field(
        default=False,
        description="Enable debug output while rendering",
    )

    strict_mode: bool = Field(
        default=False,
        description="Strict mode: treat regenerated (changed) output files as errors",
    )

    def apostrophes_get(self) -> Apostrophes:
        """
        Apostrophe handling mode for ROFF rendering.

        Returns:
            Apostrophes.HANDLE or Apostrophes.DONT_HANDLE
        """
        return Apostrophes.HANDLE if self.handle_apostrophes else Apostrophes.DONT_HANDLE

    def ordinal_make(self, index: int) -> str:
        """
        Generate the prefix of a numbered list item.

        Args:
            index: One-based item number

        Returns:
            Prefix string (e.g., "1. ")

        Example:
            >>> settings = AppSettings()
            >>> settings.ordinal_make(3)
            '3. '
        """
        return f"{index}{self.ordinal_suffix} "


# Singleton instance - import this in your code
appsettings = AppSettings()
