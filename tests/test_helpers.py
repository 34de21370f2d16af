"""Unit tests for helpers.py."""

import pytest

from cblaunch.helpers import ExecutableNotFoundError, get_app_path, is_available, mask_secret


def test_get_app_path_found(mocker):
    mocker.patch("shutil.which", return_value="/usr/local/bin/claude-bridge")

    assert get_app_path("claude-bridge") == "/usr/local/bin/claude-bridge"


def test_get_app_path_not_found(mocker):
    mocker.patch("shutil.which", return_value=None)

    with pytest.raises(ExecutableNotFoundError):
        get_app_path("claude-bridge")


@pytest.mark.parametrize("name", ["", "   "])
def test_get_app_path_rejects_blank_name(name):
    with pytest.raises(ValueError):
        get_app_path(name)


def test_is_available(mocker):
    mocker.patch("shutil.which", side_effect=lambda name: "/usr/bin/fzf" if name == "fzf" else None)

    assert is_available("fzf") is True
    assert is_available("sk") is False


@pytest.mark.parametrize(
    "value, expected",
    [
        ("", "<unset>"),
        (None, "<unset>"),
        ("short", "*****"),
        ("sk-1234567890abcd", "sk-1...abcd"),
    ],
)
def test_mask_secret(value, expected):
    assert mask_secret(value) == expected
