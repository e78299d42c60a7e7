"""Фиксированная политика минификации HTML."""

from dataclasses import asdict, dataclass
from typing import Dict


@dataclass(frozen=True)
class MinifyPolicy:
    """
    Неизменяемая конфигурация minify-html.

    Attributes:
        remove_comments: Удалять HTML комментарии
        minify_css: Минифицировать содержимое <style> и атрибутов style
        minify_js: Минифицировать содержимое <script>
        collapse_whitespace: Схлопывать незначимые пробелы между тегами
        remove_bangs: Удалять <! ... > конструкции
        remove_processing_instructions: Удалять <? ... ?> инструкции
        allow_removing_spaces_between_attributes: Удалять пробелы между атрибутами
    """

    remove_comments: bool = True
    minify_css: bool = True
    minify_js: bool = True
    collapse_whitespace: bool = True
    remove_bangs: bool = True
    remove_processing_instructions: bool = True
    allow_removing_spaces_between_attributes: bool = True

    def __post_init__(self) -> None:
        # minify-html не умеет отключать обработку пробелов
        if not self.collapse_whitespace:
            raise ValueError("collapse_whitespace=False не поддерживается minify-html")

    def as_kwargs(self) -> Dict[str, bool]:
        """Аргументы для minify_html.minify()."""
        return {
            "allow_removing_spaces_between_attributes": self.allow_removing_spaces_between_attributes,
            "keep_comments": not self.remove_comments,
            "minify_css": self.minify_css,
            "minify_js": self.minify_js,
            "remove_bangs": self.remove_bangs,
            "remove_processing_instructions": self.remove_processing_instructions,
        }

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)


DEFAULT_POLICY = MinifyPolicy()
