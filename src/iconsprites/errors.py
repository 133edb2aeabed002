from __future__ import annotations


class SpriteError(Exception):
    pass


class OptionsError(SpriteError, ValueError):
    def __init__(self, problems: list[str]) -> None:
        self.problems = list(problems)
        super().__init__("invalid options: " + "; ".join(self.problems))


class ClassificationError(SpriteError):
    pass


class PackingError(SpriteError):
    pass


class ValidationError(SpriteError):
    def __init__(self, group_name: str, messages: list[str]) -> None:
        self.group_name = group_name
        self.messages = list(messages)
        super().__init__(f"Errors from sprite '{group_name}':\n" + "\n".join(self.messages))
