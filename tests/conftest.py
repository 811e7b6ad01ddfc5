import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from models import Account  # noqa: E402


@pytest.fixture
def account():
    return Account(account_number="123456789", holder_name="Jane Doe", currency="USD")
