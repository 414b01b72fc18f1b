"""Unit tests for the set-once configuration store."""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from media_optimizer.core.config import ConfigurationStore, describe_config, load_config
from media_optimizer.core.exceptions import ConfigurationError, NotConfiguredError
from media_optimizer.core.models import MediaConfig
from media_optimizer.testing.fakes import create_test_config

RAW_CONFIG = {
    "image_kit_id": "demo",
    "supabase_url": "https://xyz.supabase.co",
    "bucket_name": "uploads",
}


class TestLoadConfig:
    """Tests for load_config."""

    def test_from_mapping(self):
        config = load_config(RAW_CONFIG)
        assert isinstance(config, MediaConfig)
        assert config.bucket_name == "uploads"

    def test_instance_passes_through(self):
        config = create_test_config()
        assert load_config(config) is config

    def test_collects_all_violations(self):
        with pytest.raises(ConfigurationError) as exc_info:
            load_config({"image_kit_id": "", "supabase_url": "nope", "bucket_name": ""})
        message = str(exc_info.value)
        assert message.startswith("Configuration error: ")
        assert "image_kit_id" in message
        assert "supabase_url" in message
        assert "bucket_name" in message

    def test_missing_field(self):
        with pytest.raises(ConfigurationError, match="bucket_name"):
            load_config({"image_kit_id": "demo", "supabase_url": "https://xyz.supabase.co"})

    def test_non_mapping(self):
        with pytest.raises(ConfigurationError, match="Expected a mapping"):
            load_config("demo")

    def test_direct_construction_raises_validation_error(self):
        with pytest.raises(ValidationError):
            MediaConfig(image_kit_id="demo", supabase_url="nope", bucket_name="uploads")

    def test_validation_error_translated_and_chained(self):
        with pytest.raises(ConfigurationError, match="supabase_url") as exc_info:
            load_config({**RAW_CONFIG, "supabase_url": "nope"})
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_unknown_field_rejected(self):
        with pytest.raises(ConfigurationError, match="region"):
            load_config({**RAW_CONFIG, "region": "eu"})


class TestConfigurationStore:
    """Tests for ConfigurationStore."""

    def test_starts_empty(self):
        store = ConfigurationStore()
        assert store.get() is None
        assert store.is_configured is False

    def test_require_before_initialize(self):
        with pytest.raises(NotConfiguredError):
            ConfigurationStore().require()

    def test_initialize_and_get(self):
        store = ConfigurationStore()
        store.initialize(RAW_CONFIG)
        config = store.get()
        assert config.image_kit_id == "demo"
        assert store.is_configured is True

    def test_get_returns_copy(self):
        store = ConfigurationStore()
        store.initialize(RAW_CONFIG)
        assert store.get() is not store.get()
        assert store.get() == store.get()

    def test_second_initialize_rejected(self):
        store = ConfigurationStore()
        store.initialize(RAW_CONFIG)
        with pytest.raises(ConfigurationError, match="already configured"):
            store.initialize({**RAW_CONFIG, "force_backup_mode": True})
        assert store.get().force_backup_mode is False

    def test_invalid_config_leaves_store_empty(self):
        store = ConfigurationStore()
        with pytest.raises(ConfigurationError):
            store.initialize({**RAW_CONFIG, "supabase_url": "http://example.com"})
        assert store.get() is None

    def test_reset(self):
        store = ConfigurationStore()
        store.initialize(RAW_CONFIG)
        store.reset()
        assert store.get() is None
        store.initialize(RAW_CONFIG)
        assert store.is_configured

    def test_debug_logs_masked_config(self):
        store = ConfigurationStore()
        with patch.object(store, "_logger") as mock_logger:
            store.initialize({**RAW_CONFIG, "image_kit_id": "ik_user_123", "debug": True})
        message = mock_logger.info.call_args[0][0]
        assert "ik_u***" in message
        assert "ik_user_123" not in message

    def test_no_log_without_debug(self):
        store = ConfigurationStore()
        with patch.object(store, "_logger") as mock_logger:
            store.initialize(RAW_CONFIG)
        mock_logger.info.assert_not_called()


def test_describe_config_masks_identifier():
    description = describe_config(create_test_config(image_kit_id="ik_user_123"))
    assert description["image_kit_id"] == "ik_u***"
    assert description["bucket_name"] == "uploads"
    assert "debug" not in description
