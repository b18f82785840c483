"""
Простая подстановка переменных {{var}} в HTML-шаблоне письма.
Значения экранируются (html.escape); ключи из raw подставляются как есть.
"""
import html
import re
from collections.abc import Collection
from typing import Any

_PLACEHOLDER = re.compile(r"\{\{(\w+)\}\}")


def render(
    template: str,
    values: dict[str, Any],
    escape: bool = True,
    raw: Collection[str] = (),
) -> str:
    """
    Подставить в template значения из values для плейсхолдеров {{key}}.

    Отсутствующий ключ: ValueError. Нестроковые значения приводятся к str(value).
    """

    def repl(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in values:
            raise ValueError(f"Missing placeholder value: {key!r}")
        value = str(values[key])
        if escape and key not in raw:
            return html.escape(value, quote=True)
        return value

    return _PLACEHOLDER.sub(repl, template)
