from datetime import datetime

import pytest

@pytest.fixture
def fixed_clock():
    return lambda: datetime(2024, 3, 1, 9, 15, 2)
