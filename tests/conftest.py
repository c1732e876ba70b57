from datetime import date

import pytest

from models import Member


@pytest.fixture
def family():
    """
    Two generations:

        Arthur (1) = Molly (2)          Fabian (8, deceased)
            |
      Bill (3) = Fleur (6), Charlie (4), Percy (5), Ginny (7, linked to Molly)
    """
    return [
        Member(1, "Arthur", date(1950, 3, 10), gender="male", spouse_id=2,
               anniversary_date=date(1975, 6, 20)),
        Member(2, "Molly", date(1952, 2, 29), gender="female", spouse_id=1,
               anniversary_date=date(1975, 6, 20)),
        Member(3, "Bill", date(1975, 11, 29), gender="male", parent_id=1, spouse_id=6,
               generation=1),
        Member(4, "Charlie", date(1977, 6, 15), gender="male", parent_id=1, generation=1),
        Member(5, "Percy", date(1980, 8, 22), gender="male", parent_id=1, generation=1),
        Member(6, "Fleur", date(1977, 7, 30), gender="female", spouse_id=3, generation=1),
        Member(7, "Ginny", date(1981, 8, 11), gender="female", parent_id=2, generation=1),
        Member(8, "Fabian", date(1940, 6, 2), date(1981, 11, 1), gender="male"),
    ]
