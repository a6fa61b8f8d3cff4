from __future__ import annotations

"""Prompt helpers for the TUI.

Every prompt reads one line. Prices and dates re-prompt until the input
parses; end of input raises ``EOFError`` so the caller can stop the session.
"""

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence, TextIO

from rich.console import Console
from rich.prompt import InvalidResponse, Prompt, PromptBase

from asset_tracker.utils.errors import ValidationError
from asset_tracker.utils.validation import DEFAULT_DATE_FORMATS, parse_date, parse_price

from .config import INVALID_DATE_TEXT, INVALID_PRICE_TEXT, THEME


class _LineInputMixin:
    """Turn an exhausted input stream into EOFError.

    Console.input returns "" at the end of a stream instead of raising.
    """

    @classmethod
    def get_input(cls, console: Console, prompt, password: bool, stream: Optional[TextIO] = None) -> str:
        value = console.input(prompt, password=password, stream=stream)
        if stream is not None and value == "":
            raise EOFError
        return value


class TextPrompt(_LineInputMixin, Prompt):
    """Free-text prompt."""


class PricePrompt(_LineInputMixin, PromptBase[Decimal]):
    """Non-negative price in dollars."""

    response_type = Decimal
    validate_error_message = f"[{THEME.error}]{INVALID_PRICE_TEXT}[/]"

    def process_response(self, value: str) -> Decimal:
        try:
            return parse_price(value)
        except ValidationError:
            raise InvalidResponse(self.validate_error_message)


class DatePrompt(_LineInputMixin, PromptBase[date]):
    """Calendar date in one of the accepted formats."""

    response_type = date
    validate_error_message = f"[{THEME.error}]{INVALID_DATE_TEXT}[/]"
    date_formats: Sequence[str] = DEFAULT_DATE_FORMATS

    def process_response(self, value: str) -> date:
        try:
            return parse_date(value, self.date_formats)
        except ValidationError:
            raise InvalidResponse(self.validate_error_message)


def get_user_input(prompt: str, console: Optional[Console] = None, stream: Optional[TextIO] = None) -> str:
    return TextPrompt.ask(f"[cyan]{prompt}[/]", console=console, stream=stream)


def get_price(prompt: str, console: Optional[Console] = None, stream: Optional[TextIO] = None) -> Decimal:
    return PricePrompt.ask(f"[cyan]{prompt}[/]", console=console, stream=stream)


def get_date(
    prompt: str,
    console: Optional[Console] = None,
    stream: Optional[TextIO] = None,
    formats: Sequence[str] = DEFAULT_DATE_FORMATS,
) -> date:
    date_prompt = DatePrompt(f"[cyan]{prompt}[/]", console=console)
    date_prompt.date_formats = tuple(formats)
    return date_prompt(stream=stream)

