"""Localized UI strings for the checklist screen."""

from __future__ import annotations

from dataclasses import dataclass

from .catalog import ActionKind


@dataclass(frozen=True)
class Messages:
    language: str
    header: str
    save_label: str
    cancel_label: str
    saved: str
    empty: str

    def action_label(self, kind: ActionKind) -> str:
        if kind is ActionKind.SAVE:
            return self.save_label
        return self.cancel_label

    def saved_message(self, pause_seconds: float) -> str:
        return self.saved.format(seconds=f"{pause_seconds:g}")


ENGLISH = Messages(
    language="en",
    header="Use ↑↓ to navigate, SPACE or ENTER to toggle, ENTER on SAVE/CANCEL to finish",
    save_label="SAVE LIST",
    cancel_label="CANCEL",
    saved="Success! The list was saved. Exiting in {seconds} seconds...",
    empty="(no list files found)",
)

RUSSIAN = Messages(
    language="ru",
    header="Используйте ↑↓ для навигации, ПРОБЕЛ или ENTER для выбора, ENTER на СОХРАНИТЬ/ОТМЕНА для завершения",
    save_label="СОХРАНИТЬ СПИСОК",
    cancel_label="ОТМЕНА",
    saved="Успешно! Список сохранен. Выход через {seconds} секунд...",
    empty="(файлы списков не найдены)",
)

DEFAULT_LANGUAGE = ENGLISH.language

_MESSAGES = {messages.language: messages for messages in (ENGLISH, RUSSIAN)}


def available_languages() -> tuple[str, ...]:
    return tuple(_MESSAGES)


def messages_for(language: str | None) -> Messages:
    if language is None:
        return _MESSAGES[DEFAULT_LANGUAGE]
    return _MESSAGES.get(language.strip().lower(), _MESSAGES[DEFAULT_LANGUAGE])
