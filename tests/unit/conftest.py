"""Unit test fixtures - domain fixtures plus a mocked unit of work.

Application layer unit tests exercise use case orchestration with every store
replaced by an AsyncMock.
"""

from unittest.mock import AsyncMock, Mock

import pytest

from src.domain.repositories import UnitOfWorkProtocol

# Import all domain fixtures to make them available to unit tests
from tests.domain.conftest import (
    campaign,
    catalog,
    default_configuration,
    perfect_playlist,
    required_only_playlist,
    rock_playlist,
    weighted_configuration,
)

# Re-export for pytest discovery
__all__ = [
    "campaign",
    "catalog",
    "default_configuration",
    "mock_uow",
    "perfect_playlist",
    "required_only_playlist",
    "rock_playlist",
    "weighted_configuration",
]


@pytest.fixture
def mock_uow():
    """UnitOfWork mock whose repositories are AsyncMocks.

    The settings repository reports nothing stored, so the default
    configuration applies unless a test says otherwise.
    """
    uow = Mock(spec=UnitOfWorkProtocol)
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=None)
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    settings_repo = AsyncMock()
    settings_repo.get_matching_settings.return_value = None
    uow.get_matching_settings_repository.return_value = settings_repo
    uow.get_campaign_repository.return_value = AsyncMock()
    uow.get_playlist_repository.return_value = AsyncMock()
    uow.get_pitch_repository.return_value = AsyncMock()
    return uow
