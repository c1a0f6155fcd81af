class TableOrdersError(Exception):
    """Базовая ошибка сервиса заказов."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidRequest(TableOrdersError):
    """Запрос отклонён до обращения к базе (например, пустой список блюд)."""

    status_code = 400


class NotFound(TableOrdersError):
    status_code = 404


class ConstraintViolation(TableOrdersError):
    """Нарушение внешнего ключа или уникальности на стороне базы."""

    status_code = 409


class StorageFailure(TableOrdersError):
    status_code = 500
