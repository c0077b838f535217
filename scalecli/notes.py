"""Note model: parsing and canonical rendering of note names such as 'A#4' or 'Bb-1'."""

import logging
import re
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)

MAX_REGISTER = 99

# letter, optional accidental, optional signed register of one or two digits
# written without leading zeros or a negative zero
NOTE_PATTERN = re.compile(r"([A-G])([#b]?)((?!-0)-?(?:0|[1-9][0-9]?))?")


# ── Errors ───────────────────────────────────────────────────────────────────

class NoteError(ValueError):
    """Base class for note model errors."""


class InvalidNoteError(NoteError):
    """Raised when text does not match the note grammar."""

    def __init__(self, text: object) -> None:
        super().__init__(f"Invalid note: {text!r}. Expected e.g. 'C', 'F#4', 'Bb-1'.")
        self.text = text


class InvalidAccidentalError(NoteError):
    """Raised when a character has no accidental meaning. Indicates a caller bug."""

    def __init__(self, char: object) -> None:
        super().__init__(f"Invalid accidental: {char!r}. Expected '#' or 'b'.")
        self.char = char


# ── Enumerations ─────────────────────────────────────────────────────────────

class NoteLetter(Enum):
    """Natural note letters in musical order."""

    A = "A"
    B = "B"
    C = "C"
    D = "D"
    E = "E"
    F = "F"
    G = "G"

    def __str__(self) -> str:
        return self.value


class Accidental(Enum):
    """A single semitone alteration of a letter."""

    SHARP = "#"
    FLAT = "b"

    @property
    def semitones(self) -> int:
        """Signed semitone offset: +1 for a sharp, -1 for a flat."""
        return _SEMITONES[self]

    def to_char(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, char: str) -> "Accidental":
        """
        Decode an accidental character.

        Args:
            char: '#' or 'b'.

        Returns:
            The matching Accidental.

        Raises:
            InvalidAccidentalError: For any other value.
        """
        try:
            return _ACCIDENTAL_CHARS[char]
        except (KeyError, TypeError):
            raise InvalidAccidentalError(char) from None

    def __str__(self) -> str:
        return self.value


_SEMITONES: dict[Accidental, int] = {
    Accidental.SHARP: 1,
    Accidental.FLAT: -1,
}

_ACCIDENTAL_CHARS: dict[str, Accidental] = {acc.value: acc for acc in Accidental}

#: Spellings that land on a natural letter a semitone away.
ENHARMONIC_NATURALS: dict[tuple[NoteLetter, Accidental], NoteLetter] = {
    (NoteLetter.B, Accidental.SHARP): NoteLetter.C,
    (NoteLetter.C, Accidental.FLAT): NoteLetter.B,
    (NoteLetter.E, Accidental.SHARP): NoteLetter.F,
    (NoteLetter.F, Accidental.FLAT): NoteLetter.E,
}


# ── Note ─────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Note:
    """
    A note name as written: letter, optional accidental and optional register.

    Notes keep the spelling they were given. Enharmonic clean-up only happens
    in ``normalized()`` and when the note is rendered, so downstream logic
    sees exactly what the user typed.

    Attributes:
        letter:     Natural letter A..G.
        accidental: SHARP, FLAT or None for no alteration.
        register:   Signed register (octave) number, or None when unspecified.
    """

    letter: NoteLetter
    accidental: Accidental | None = None
    register: int | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.letter, NoteLetter):
            raise TypeError(f"letter must be a NoteLetter, not {self.letter!r}")
        if self.accidental is not None and not isinstance(self.accidental, Accidental):
            raise TypeError(f"accidental must be an Accidental or None, not {self.accidental!r}")
        if self.register is not None and (
            isinstance(self.register, bool) or not isinstance(self.register, int)
        ):
            raise TypeError(f"register must be an int or None, not {self.register!r}")
        if self.register is not None and abs(self.register) > MAX_REGISTER:
            raise ValueError(
                f"register must be between {-MAX_REGISTER} and {MAX_REGISTER}, not {self.register}"
            )

    @classmethod
    def parse(cls, text: str) -> "Note":
        return parse_note(text)

    def normalized(self) -> "Note":
        """Return this note with E#, B#, Fb and Cb collapsed to their natural letters."""
        if self.accidental is None:
            return self
        natural = ENHARMONIC_NATURALS.get((self.letter, self.accidental))
        if natural is None:
            return self
        return Note(natural, None, self.register)

    def __str__(self) -> str:
        return format_note(self)


# ── Public API ───────────────────────────────────────────────────────────────

def parse_note(text: str) -> Note:
    """
    Parse a note name into a Note without normalizing its spelling.

    The whole string must match; leading or trailing characters are rejected.

    Args:
        text: Note name, e.g. "G", "Gb", "A#10" or "Ab-4".

    Returns:
        Note with the literal letter, accidental and register.

    Raises:
        InvalidNoteError: If the text is not a well-formed note name.
    """
    match = NOTE_PATTERN.fullmatch(text) if isinstance(text, str) else None
    if match is None:
        logger.debug("Rejected note name %r", text)
        raise InvalidNoteError(text)

    letter_text, accidental_text, register_text = match.groups()
    note = Note(
        letter=NoteLetter(letter_text),
        accidental=Accidental.from_char(accidental_text) if accidental_text else None,
        register=int(register_text) if register_text is not None else None,
    )
    logger.debug("Parsed %r as %r", text, note)
    return note


def format_note(note: Note) -> str:
    """
    Render a Note in its canonical spelling.

    Examples: E# → "F", Fb2 → "E2", Cb-1 → "B-1", A#2 → "A#2".
    """
    canonical = note.normalized()
    accidental = canonical.accidental.to_char() if canonical.accidental is not None else ""
    register = str(canonical.register) if canonical.register is not None else ""
    return f"{canonical.letter.value}{accidental}{register}"
