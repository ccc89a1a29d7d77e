import os
import sys

import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from builders import make_vk, make_proof


@pytest.fixture
def vk():
    return make_vk()


@pytest.fixture
def proof():
    return make_proof()
