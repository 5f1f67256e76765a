from __future__ import annotations

import pytest

from interview.config import settings


@pytest.fixture
def no_confirm(monkeypatch):
    """Skip the final "Accept value?" question in build()."""
    monkeypatch.setattr(settings, "CONFIRM_VALUE", False)
