"""Tests for credential resolution order."""
from __future__ import annotations

import os
from unittest.mock import MagicMock, patch

import pytest
from google.auth import exceptions as auth_exceptions

from contact_form.domain.errors import ConfigurationError
from contact_form.infrastructure.firestore.credentials import (
    ResolvedCredentials,
    resolve_credentials,
    resolve_project_id,
)


@pytest.fixture
def key_file(tmp_path):
    path = tmp_path / "key.json"
    path.write_text("{}")
    return str(path)


@pytest.fixture
def load_file():
    with patch("google.auth.load_credentials_from_file") as mock:
        mock.return_value = (MagicMock(name="file-credentials"), "file-project")
        yield mock


@pytest.fixture
def adc():
    with patch("google.auth.default") as mock:
        mock.return_value = (MagicMock(name="adc-credentials"), "adc-project")
        yield mock


class TestResolveCredentials:
    def test_missing_explicit_path_fails_without_fallback(self, tmp_path, load_file, adc):
        missing = str(tmp_path / "missing.json")

        with pytest.raises(ConfigurationError) as exc_info:
            resolve_credentials(missing, bundled_path=None)

        assert missing in str(exc_info.value)
        load_file.assert_not_called()
        adc.assert_not_called()

    def test_explicit_path_wins(self, key_file, tmp_path, load_file, adc):
        bundled = tmp_path / "bundled.json"
        bundled.write_text("{}")

        resolved = resolve_credentials(key_file, str(bundled))

        load_file.assert_called_once_with(key_file)
        adc.assert_not_called()
        assert resolved.source == "path"
        assert resolved.project_id == "file-project"

    def test_bundled_file_used_when_no_path(self, key_file, load_file, adc):
        resolved = resolve_credentials("", key_file)

        load_file.assert_called_once_with(key_file)
        adc.assert_not_called()
        assert resolved.source == "bundled"

    def test_application_default_when_nothing_else(self, tmp_path, load_file, adc):
        resolved = resolve_credentials(None, str(tmp_path / "absent.json"))

        load_file.assert_not_called()
        adc.assert_called_once()
        assert resolved.source == "application_default"
        assert resolved.project_id == "adc-project"

    def test_all_sources_failing_lists_the_options(self, adc):
        adc.side_effect = auth_exceptions.DefaultCredentialsError("none")

        with pytest.raises(ConfigurationError) as exc_info:
            resolve_credentials(None, None)

        text = str(exc_info.value)
        assert "FIREBASE_CREDENTIALS" in text
        assert "firebase-service-account.json" in text
        assert "GOOGLE_APPLICATION_CREDENTIALS" in text

    def test_unreadable_key_file_is_a_configuration_error(self, key_file, load_file):
        load_file.side_effect = auth_exceptions.DefaultCredentialsError("bad json")

        with pytest.raises(ConfigurationError):
            resolve_credentials(key_file, None)


class TestResolveProjectId:
    def test_prefers_project_from_credentials(self):
        resolved = ResolvedCredentials(MagicMock(), "cred-project", "path")
        with patch.dict(os.environ, {"GOOGLE_CLOUD_PROJECT": "env-project"}):
            assert resolve_project_id(resolved) == "cred-project"

    def test_falls_back_to_environment(self):
        resolved = ResolvedCredentials(MagicMock(), None, "path")
        with patch.dict(os.environ, {"GOOGLE_CLOUD_PROJECT": "env-project"}):
            assert resolve_project_id(resolved) == "env-project"

    def test_gcloud_project_variable(self):
        resolved = ResolvedCredentials(MagicMock(), None, "path")
        with patch.dict(os.environ, {"GCLOUD_PROJECT": "legacy-project"}, clear=True):
            assert resolve_project_id(resolved) == "legacy-project"

    def test_returns_none_when_unknown(self):
        resolved = ResolvedCredentials(MagicMock(), None, "application_default")
        with patch.dict(os.environ, {}, clear=True):
            assert resolve_project_id(resolved) is None
