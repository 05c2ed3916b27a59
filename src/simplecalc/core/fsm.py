"""
Finite-state recognizers for lexemes.

An FSM walks its input one character at a time and reports the longest
prefix it consumed, provided it stopped in an accepting state. The lexer
uses the number and identifier machines below to delimit lexemes.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from enum import Enum, auto
from typing import Generic, TypeVar

S = TypeVar("S", bound=Hashable)


@dataclass(frozen=True)
class FSM(Generic[S]):
    """
    A deterministic finite-state machine over characters.

    Attributes:
        states: Every state the machine can be in
        initial_state: State before any character is consumed
        accepting_states: States in which the consumed prefix is a match
        next_state: Transition function; returns None when no transition exists
    """

    states: frozenset[S]
    initial_state: S
    accepting_states: frozenset[S]
    next_state: Callable[[S, str], S | None]

    def run(self, text: str, start: int = 0) -> str | None:
        """
        Run the machine on ``text`` beginning at index ``start``.

        Returns:
            The consumed prefix if the machine halted in an accepting
            state, otherwise None.
        """
        state, end = self.walk(text, start)
        if state in self.accepting_states:
            return text[start:end]
        return None

    def walk(self, text: str, start: int = 0) -> tuple[S, int]:
        """Consume as much of ``text`` as the transitions allow.

        Returns:
            The halting state and the index one past the last consumed
            character, whether or not that state is accepting.
        """
        state = self.initial_state
        end = start
        while end < len(text):
            following = self.next_state(state, text[end])
            if following is None:
                break
            state = following
            end += 1
        return state, end


# ---------------------------------------------------------------------------
# Number recognizer: 12, 3.5, 5e-9, 1.2E+3
# ---------------------------------------------------------------------------


class NumberState(Enum):
    INITIAL = auto()
    INTEGER = auto()
    BEGIN_FRACTION = auto()
    FRACTION = auto()
    BEGIN_EXPONENT = auto()
    BEGIN_SIGNED_EXPONENT = auto()
    EXPONENT = auto()


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _number_transition(state: NumberState, ch: str) -> NumberState | None:
    if state is NumberState.INITIAL:
        return NumberState.INTEGER if _is_digit(ch) else None

    if state is NumberState.INTEGER:
        if _is_digit(ch):
            return NumberState.INTEGER
        if ch == ".":
            return NumberState.BEGIN_FRACTION
        if ch in "eE":
            return NumberState.BEGIN_EXPONENT
        return None

    if state is NumberState.BEGIN_FRACTION:
        return NumberState.FRACTION if _is_digit(ch) else None

    if state is NumberState.FRACTION:
        if _is_digit(ch):
            return NumberState.FRACTION
        if ch in "eE":
            return NumberState.BEGIN_EXPONENT
        return None

    if state is NumberState.BEGIN_EXPONENT:
        if _is_digit(ch):
            return NumberState.EXPONENT
        if ch in "+-":
            return NumberState.BEGIN_SIGNED_EXPONENT
        return None

    # BEGIN_SIGNED_EXPONENT and EXPONENT both continue on digits only
    return NumberState.EXPONENT if _is_digit(ch) else None


def build_number_recognizer() -> FSM[NumberState]:
    """Build the FSM matching integer, decimal and scientific literals."""
    return FSM(
        states=frozenset(NumberState),
        initial_state=NumberState.INITIAL,
        accepting_states=frozenset(
            {NumberState.INTEGER, NumberState.FRACTION, NumberState.EXPONENT}
        ),
        next_state=_number_transition,
    )


# ---------------------------------------------------------------------------
# Identifier recognizer: letter or underscore, then letters/digits/underscores
# ---------------------------------------------------------------------------


class IdentifierState(Enum):
    INITIAL = auto()
    IDENTIFIER = auto()


def _is_ident_start(ch: str) -> bool:
    return ch.isascii() and (ch.isalpha() or ch == "_")


def _identifier_transition(state: IdentifierState, ch: str) -> IdentifierState | None:
    if state is IdentifierState.INITIAL:
        return IdentifierState.IDENTIFIER if _is_ident_start(ch) else None
    if _is_ident_start(ch) or _is_digit(ch):
        return IdentifierState.IDENTIFIER
    return None


def build_identifier_recognizer() -> FSM[IdentifierState]:
    """Build the FSM matching identifiers."""
    return FSM(
        states=frozenset(IdentifierState),
        initial_state=IdentifierState.INITIAL,
        accepting_states=frozenset({IdentifierState.IDENTIFIER}),
        next_state=_identifier_transition,
    )


NUMBER_RECOGNIZER = build_number_recognizer()
IDENTIFIER_RECOGNIZER = build_identifier_recognizer()
