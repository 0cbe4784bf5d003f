"""Typewriter animation frames for the homepage hero text.

Each frame is the text to show and how long to hold it. The page script
only has to play the frames back, so timing rules live here.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from itertools import islice

from portfolio.core.errors import InvalidInputError


@dataclass(frozen=True)
class TypewriterFrame:
    text: str
    delay_ms: int


def _word_frames(
    word: str,
    type_speed: int,
    delete_speed: int,
    delay_speed: int,
    erase: bool,
) -> Iterator[TypewriterFrame]:
    for n in range(1, len(word) + 1):
        # Hold the finished word before erasing it
        delay = delay_speed if n == len(word) else type_speed
        yield TypewriterFrame(word[:n], delay)
    if erase:
        for n in range(len(word) - 1, -1, -1):
            yield TypewriterFrame(word[:n], delete_speed)


def typewriter_frames(
    words: Sequence[str],
    *,
    type_speed: int = 50,
    delete_speed: int = 50,
    delay_speed: int = 1000,
    loop: bool = True,
) -> Iterator[TypewriterFrame]:
    """Frames of the typewriter animation.

    Words are typed one character at a time, held for ``delay_speed``
    milliseconds, then erased. With ``loop`` the sequence never ends;
    without it the last word is left on screen.

    Raises:
        InvalidInputError: If words is empty or contains a blank word.
    """
    if not words or any(not word for word in words):
        raise InvalidInputError("Typewriter needs at least one non-empty word")
    return _frames(words, type_speed, delete_speed, delay_speed, loop)


def _frames(
    words: Sequence[str],
    type_speed: int,
    delete_speed: int,
    delay_speed: int,
    loop: bool,
) -> Iterator[TypewriterFrame]:
    while True:
        for i, word in enumerate(words):
            last = i == len(words) - 1
            yield from _word_frames(
                word,
                type_speed,
                delete_speed,
                delay_speed,
                erase=loop or not last,
            )
        if not loop:
            return


def typewriter_cycle(words: Sequence[str], **timing: int) -> list[TypewriterFrame]:
    """One full pass over the words, for clients that loop playback themselves."""
    count = sum(2 * len(word) for word in words)
    return list(islice(typewriter_frames(words, loop=True, **timing), count))
