import matplotlib

matplotlib.use('Agg')

import pytest

from clothsim import Cloth



@pytest.fixture
def pair():
    """Two points 10 apart; point 0 pinned, point 1 free."""
    return Cloth(width=2, height=1, spacing=10, start_x=0, start_y=0, elasticity=10.0)


@pytest.fixture
def grid():
    """3x3 cloth with spacing 20 so a pointer placed on a point selects only that point."""
    return Cloth(width=3, height=3, spacing=20, start_x=0, start_y=0, elasticity=1.0)
