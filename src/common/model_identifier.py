"""Generative model identifiers."""

from enum import StrEnum


class ModelIdentifier(StrEnum):
    """Supported generative model identifiers."""

    GEMINI_1_5_FLASH = "gemini-1.5-flash"
    GEMINI_2_0_PRO = "gemini-2.0-pro"
