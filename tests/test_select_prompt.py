"""Tests for the arrow-key prompts (cli/select_prompt.py).

``questionary`` is replaced by a mock so no terminal is needed; the
tests cover the mapping between selector values and option keys.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from ttyask.cli.select_prompt import confirm_select, select_option
from ttyask.core.models import OptionSet, PromptSettings
from ttyask.exceptions import SelectionCancelledError


def _questionary(answer: object) -> MagicMock:
    module = MagicMock()
    module.Choice = _fake_choice_class()
    module.select.return_value.ask.return_value = answer
    module.confirm.return_value.ask.return_value = answer
    return module


def _fake_choice_class() -> type:
    class FakeChoice:
        def __init__(self, title: str, value: object) -> None:
            self.title = title
            self.value = value

    return FakeChoice


FRUITS = OptionSet.from_mapping({"a": "Apple", "b": "Banana", "c": "Cherry"})


class TestSelectOption:
    @patch("ttyask.cli.select_prompt._import_questionary")
    def test_returns_key_for_selected_index(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(2)
        assert select_option(FRUITS, "Pick", "b") == "c"

    @patch("ttyask.cli.select_prompt._import_questionary")
    def test_non_string_keys(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(0)
        options = OptionSet.from_pairs([((1, 2), "pair"), (None, "none")])
        assert select_option(options, "Pick") == (1, 2)

    @patch("ttyask.cli.select_prompt._import_questionary")
    def test_choices_in_order_with_default(self, mock_q: MagicMock) -> None:
        questionary_mod = _questionary(1)
        mock_q.return_value = questionary_mod

        select_option(FRUITS, "Pick", "b")

        kwargs = questionary_mod.select.call_args.kwargs
        assert [c.title for c in kwargs["choices"]] == ["Apple", "Banana", "Cherry"]
        assert kwargs["default"] is kwargs["choices"][1]

    @patch("ttyask.cli.select_prompt._import_questionary")
    def test_unknown_default_preselects_nothing(self, mock_q: MagicMock) -> None:
        questionary_mod = _questionary(0)
        mock_q.return_value = questionary_mod

        select_option(FRUITS, "Pick", "zzz")

        assert questionary_mod.select.call_args.kwargs["default"] is None

    @patch("ttyask.cli.select_prompt._import_questionary")
    def test_cancel_raises(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(None)
        with pytest.raises(SelectionCancelledError, match="No option selected"):
            select_option(FRUITS, "Pick")


class TestConfirmSelect:
    @patch("ttyask.cli.select_prompt._import_questionary")
    def test_auto_yes_skips_questionary(
        self, mock_q: MagicMock, recording_renderer,
    ) -> None:
        renderer = recording_renderer
        assert confirm_select("Go?", False, PromptSettings(auto_yes=True), renderer) is True
        mock_q.assert_not_called()

    def test_auto_yes_shows_question_and_echo(self, recording_renderer) -> None:
        renderer = recording_renderer
        confirm_select("Go?", True, PromptSettings(auto_yes=True), renderer)
        assert renderer.texts == ["Go? (Y/n): ", "y"]
        assert renderer.writes[0].newline is False
        assert renderer.writes[1].newline is True

    @pytest.mark.parametrize("answer", [True, False])
    @patch("ttyask.cli.select_prompt._import_questionary")
    def test_returns_answer(self, mock_q: MagicMock, answer: bool) -> None:
        questionary_mod = _questionary(answer)
        mock_q.return_value = questionary_mod

        assert confirm_select("Go?", True, PromptSettings()) is answer
        questionary_mod.confirm.assert_called_once_with("Go?", default=True)

    @patch("ttyask.cli.select_prompt._import_questionary")
    def test_cancel_raises(self, mock_q: MagicMock) -> None:
        mock_q.return_value = _questionary(None)
        with pytest.raises(SelectionCancelledError):
            confirm_select("Go?", False, PromptSettings())
