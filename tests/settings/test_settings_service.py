import pytest

from src.workforce_admin.workforce_admin.core.exceptions import ValidationError
from src.workforce_admin.workforce_admin.settings.model import ConsoleSettings


def test_defaults():
    settings = ConsoleSettings()
    assert settings.company_name == "ABC Retail Store"
    assert settings.overtime_threshold == 40
    assert settings.timeclock_notifications is False


@pytest.mark.parametrize(
    "changes",
    [
        {"unknown_key": 1},
        {"email_notifications": "yes"},
        {"overtime_threshold": -5},
        {"default_shift_length": "long"},
        {"company_name": ""},
        {"work_week_start": "someday"},
    ],
)
def test_invalid_changes_are_rejected(container, changes):
    with pytest.raises(ValidationError):
        container.settings_service.save(ConsoleSettings(), changes)


def test_numeric_strings_are_coerced(container):
    saved = container.settings_service.save(ConsoleSettings(), {"default_shift_length": "10"})
    assert saved.default_shift_length == 10


def test_failed_save_leaves_state_untouched(store):
    before = store.state.settings
    with pytest.raises(ValidationError):
        store.save_settings({"timezone": "  "})
    assert store.state.settings is before
