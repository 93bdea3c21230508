"""
Abstract base class for enum-driven polymorphic dispatch services.

The pattern shared by the question and form view services:
1. An enum names the cases (QuestionKind, EditTab)
2. A dispatch table maps every enum member to a handler method
3. _determine_strategy() picks the member from the input
4. dispatch() calls the matching handler

Handler tables must be exhaustive: registering a table that misses a
member of the enum fails at construction, not at the first render of the
missing case.

Example:
    class PreviewService(EnumDispatchService[QuestionKind]):
        def __init__(self):
            super().__init__()
            self._register_handlers({
                QuestionKind.SHORT_ANSWER: self._preview_text,
                ...
            }, QuestionKind)

        def _determine_strategy(self, question, **kwargs) -> QuestionKind:
            return question.kind
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import TypeVar, Generic, Dict, Callable, Any, Optional, Type
import logging

logger = logging.getLogger(__name__)

# Type variable for the strategy enum
StrategyEnum = TypeVar('StrategyEnum', bound=Enum)


class EnumDispatchService(ABC, Generic[StrategyEnum]):
    """
    Abstract base class for services using enum-driven polymorphic dispatch.

    Subclasses must:
    1. Register handlers in __init__() using _register_handlers()
    2. Implement _determine_strategy() to select the enum member
    """

    def __init__(self):
        """Initialize the service with an empty handler registry."""
        self._handlers: Dict[StrategyEnum, Callable] = {}

    def _register_handlers(self, handlers: Dict[StrategyEnum, Callable],
                           strategy_type: Optional[Type[StrategyEnum]] = None) -> None:
        """
        Register strategy handlers.

        Args:
            handlers: Dictionary mapping strategy enum values to handler methods
            strategy_type: Enum the table must cover completely, if given

        Raises:
            ValueError: If handlers is empty or misses members of strategy_type
        """
        if not handlers:
            raise ValueError(f"{self.__class__.__name__}: Handler registry cannot be empty")

        if strategy_type is not None:
            missing = [member for member in strategy_type if member not in handlers]
            if missing:
                raise ValueError(
                    f"{self.__class__.__name__}: No handler for {[m.value for m in missing]}"
                )

        self._handlers = handlers
        logger.debug(f"{self.__class__.__name__}: Registered {len(handlers)} handlers")

    @abstractmethod
    def _determine_strategy(self, *args, **kwargs) -> StrategyEnum:
        """
        Determine which strategy to use based on input.

        Returns:
            Strategy enum value indicating which handler to use
        """
        pass

    def dispatch(self, *args, **kwargs) -> Any:
        """
        Dispatch to the handler for the determined strategy.

        The first positional argument is the primary context (a question, the
        app state) and is forwarded together with all keyword arguments.

        Raises:
            KeyError: If strategy is not registered in handlers
        """
        strategy = self._determine_strategy(*args, **kwargs)

        if strategy not in self._handlers:
            raise KeyError(
                f"{self.__class__.__name__}: No handler registered for strategy {strategy}. "
                f"Available strategies: {list(self._handlers.keys())}"
            )
        handler = self._handlers[strategy]

        handler_args = args[:1] if args else ()
        return handler(*handler_args, **kwargs)

    def get_registered_strategies(self) -> list[StrategyEnum]:
        return list(self._handlers.keys())

    def has_strategy(self, strategy: StrategyEnum) -> bool:
        return strategy in self._handlers
