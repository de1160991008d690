from pathlib import Path

import pytest

GATSBY = (
    "In my younger and more vulnerable years my father gave me some advice "
    "that I've been turning over in my mind ever since. Gatsby believed in "
    "the green light, old sport. Gatsby, old sport, Gatsby!\n"
)

POTTER = (
    "\"Harry!\" said Ron. Harry looked up. Hermione and Ron were waiting, "
    "and said Professor McGonagall would not be pleased. I dunno, said Harry.\n"
)


@pytest.fixture
def books(tmp_path: Path):
    gatsby = tmp_path / "gatsby.txt"
    gatsby.write_text(GATSBY, encoding="utf-8")
    potter = tmp_path / "potter.txt"
    potter.write_text(POTTER, encoding="utf-8")
    return [str(gatsby), str(potter)]
