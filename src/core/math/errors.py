"""
Errors — таксономия ошибок детерминированной десятичной арифметики

Два независимых канала ошибок:

1. DecInputError (ValueError) — восстановимые ошибки входных данных.
   Возникают при разборе внешнего (недоверенного) ввода ДО входа в
   детерминированное исполнение. Вызывающий код обязан отклонить ввод.
   - ParseError: строка не соответствует грамматике -?[0-9]+(\\.[0-9]+)?
   - PrecisionExceeded: больше 18 дробных разрядов

2. DecFault (ArithmeticError) — невосстановимые сбои.
   Возникают в точке операции и прерывают её немедленно.
   Никогда не перехватываются внутри библиотеки.
   - Overflow: |raw| > 2^256 - 1
   - DivideByZero: деление на нулевой операнд

Каналы НЕ объединяются: clamp/wrap/fallback при переполнении дали бы
расхождение состояния между репликами.
"""


# =============================================================================
# ВОССТАНОВИМЫЕ ОШИБКИ ВВОДА
# =============================================================================


class DecInputError(ValueError):
    """Базовый класс ошибок разбора внешнего ввода."""

    pass


class ParseError(DecInputError):
    """Некорректный литерал: пустая строка, лишние знаки/точки, не-цифры."""

    pass


class PrecisionExceeded(DecInputError):
    """Дробная часть литерала длиннее PRECISION разрядов."""

    pass


# =============================================================================
# НЕВОССТАНОВИМЫЕ СБОИ
# =============================================================================


class DecFault(ArithmeticError):
    """
    Невосстановимый арифметический сбой.

    Текущая операция (и транзакция, в которой она исполняется) прерывается
    одинаково на всех репликах. Повтор с другими входами не выполняется.
    """

    pass


class Overflow(DecFault, OverflowError):
    """Масштабированное значение вышло за границу |raw| <= 2^256 - 1."""

    pass


class DivideByZero(DecFault, ZeroDivisionError):
    """Деление на нулевой операнд (любой режим округления)."""

    pass
