"""
Lines of the "99 Bottles of Beer" song as a generator.

http://99-bottles-of-beer.net/lyrics.html
"""

from typing import Iterator

START = 99


def bottles(count: int) -> str:
    if count == 0:
        return "no more bottles"
    return f"{count} bottle{'' if count == 1 else 's'}"


def get_99_bottles_of_beer(start: int = START) -> Iterator[str]:
    """
    Yields '99 bottles of beer on the wall, 99 bottles of beer.', then
    'Take one down and pass it around, 98 bottles of beer on the wall.', and
    so on down to the closing pair of lines.
    """
    if start < 1:
        raise ValueError(f"Need at least 1 bottle to start the song, got {start}")

    count = start
    while count > 0:
        yield f"{bottles(count)} of beer on the wall, {bottles(count)} of beer."
        count -= 1
        yield f"Take one down and pass it around, {bottles(count)} of beer on the wall."

    yield "No more bottles of beer on the wall, no more bottles of beer."
    yield f"Go to the store and buy some more, {bottles(start)} of beer on the wall."
