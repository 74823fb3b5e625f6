import pytest

import pbrforge as pf

from material_fixtures import METAL, STYLES


@pytest.fixture
def metal_params():
    return pf.GenerationParameters.from_mapping(METAL)


@pytest.fixture(params=STYLES)
def style_params(request):
    return pf.material_parameters("stone", pattern_style=request.param, color_variation=0.4)
