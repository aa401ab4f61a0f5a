"""
Unit tests for configuration module
"""
import pytest
import os
from unittest.mock import patch
from charter_ops.config import Config

class TestConfig:

    def test_config_defaults(self):
        """Test default values with an empty environment"""
        with patch.dict(os.environ, {}, clear=True):
            config = Config()

        assert config.database.url == "sqlite:///./charter_ops.db"
        assert config.charter.refetch_interval_seconds == 30
        assert config.charter.briefing_lead_minutes == 0
        assert config.charter.default_assignment_status == "planned"
        assert config.logging.level == "INFO"
        assert config.app.port == 8000

    @patch.dict(os.environ, {
        'DATABASE_URL': 'sqlite:///./other.db',
        'REFETCH_INTERVAL_SECONDS': '10',
        'BRIEFING_LEAD_MINUTES': '60',
        'DEFAULT_ASSIGNMENT_STATUS': 'confirmed',
        'DEBUG': 'true'
    })
    def test_config_from_env(self):
        """Test configuration loading from environment variables"""
        config = Config()

        assert config.database.url == 'sqlite:///./other.db'
        assert config.charter.refetch_interval_seconds == 10
        assert config.charter.briefing_lead_minutes == 60
        assert config.charter.default_assignment_status == 'confirmed'
        assert config.app.debug is True

    def test_config_validation_success(self):
        with patch.dict(os.environ, {}, clear=True):
            assert Config().validate() == True

    @pytest.mark.parametrize("env", [
        {'REFETCH_INTERVAL_SECONDS': '0'},
        {'BRIEFING_LEAD_MINUTES': '-5'},
        {'DEFAULT_ASSIGNMENT_STATUS': 'unassigned'},
        {'LOG_LEVEL': 'LOUD'},
    ])
    def test_config_validation_failure(self, env):
        with patch.dict(os.environ, env):
            assert Config().validate() == False

def test_web_server_refuses_invalid_config():
    from charter_ops import run
    from charter_ops.utils.exceptions import ConfigurationException

    with patch.object(run.config.charter, "refetch_interval_seconds", 0):
        with pytest.raises(ConfigurationException):
            run.run_web_server()
