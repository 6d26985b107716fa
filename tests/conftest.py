import pytest

CANONICAL = """\
#############
#...........#
###B#C#B#D###
  #A#D#C#A#
  #########
"""

# Only the top pods of the first two rooms are swapped
SWAPPED = """\
#############
#...........#
###B#A#C#D###
  #A#B#C#D#
  #########
"""

# One amber pod already parked in the hallway
PARKED = """\
#############
#.A.........#
###.#C#B#D###
  #A#D#C#B#
  #########
"""


@pytest.fixture(scope="session")
def canonical_diagram():
    return CANONICAL


@pytest.fixture(scope="session")
def swapped_diagram():
    return SWAPPED


@pytest.fixture(scope="session")
def parked_diagram():
    return PARKED
