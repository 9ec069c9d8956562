from __future__ import annotations


class QueryIteratorError(Exception):
    """Базовая ошибка пакета query_iterator."""


class InvalidArgumentError(QueryIteratorError, ValueError):
    """Источник, размер чанка или обёрнутый итератор не подходят."""


class ReadOnlyIteratorError(QueryIteratorError, TypeError):
    """Итератор только для чтения: запись и удаление по индексу запрещены."""
