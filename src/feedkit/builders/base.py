"""Abstract builder interface using Protocol.

Every builder follows the same staged protocol:

    builder = XBuilder()          # default-valued
    builder.field(value)...       # chained setters, values stored verbatim
    builder.validate()            # optional, raises on the first violation
    model = builder.finalize()    # conversions, returns a frozen model

finalize() does not lock the builder: each call re-derives a fresh model
from the current builder state.
"""

import functools
from typing import Callable, Protocol, TypeVar

from pydantic import BaseModel

from feedkit.exceptions import FeedValidationError
from feedkit.utils.logger import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel, covariant=True)
BuilderT = TypeVar("BuilderT")


class FeedBuilder(Protocol[ModelT]):
    """Feed element builder abstraction protocol."""

    def validate(self) -> "FeedBuilder[ModelT]":
        """Check format constraints.

        Returns:
            The same builder, unchanged.

        Raises:
            FeedValidationError: On the first violated constraint.
        """
        ...

    def finalize(self) -> ModelT:
        """Build the immutable model from the current builder state.

        Raises:
            FeedValidationError: When a representation conversion fails.
        """
        ...


def logs_rejection(func: Callable[[BuilderT], BuilderT]) -> Callable[[BuilderT], BuilderT]:
    """Log validation failures at debug level before re-raising them."""

    @functools.wraps(func)
    def wrapper(self):
        try:
            return func(self)
        except FeedValidationError as e:
            logger.debug(
                "Validation failed",
                builder=type(self).__name__,
                field=e.field,
                value=e.value,
            )
            raise

    return wrapper
