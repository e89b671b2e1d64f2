# SPDX-License-Identifier: MIT

import logging
import threading
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Generic, Iterator, Sequence, TypeVar

from propfilter.exceptions import ContextInUseError
from propfilter.model.restriction import Operator

logger = logging.getLogger(__name__)

P = TypeVar("P")


class QueryContext(ABC, Generic[P]):
    """
    Builds predicates for one query backend.

    A context is bound to a single translation pass at a time. Use
    `query_session` to bind it; the session resets it on every exit path.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._active = False

    @property
    @abstractmethod
    def operators(self) -> frozenset[Operator]: ...

    @abstractmethod
    def predicate(self, operator: Operator, property_name: str, value: Any) -> P: ...

    @abstractmethod
    def and_(self, predicates: Sequence[P]) -> P: ...

    @abstractmethod
    def or_(self, predicates: Sequence[P]) -> P: ...

    @abstractmethod
    def always_true(self) -> P: ...

    def reset(self) -> None:
        """Drop state accumulated during a pass. Backends override as needed."""

    @property
    def active(self) -> bool:
        return self._active

    def open(self) -> None:
        with self._lock:
            if self._active:
                raise ContextInUseError()
            self._active = True

    def close(self) -> None:
        with self._lock:
            try:
                self.reset()
            finally:
                self._active = False


@contextmanager
def query_session(context: QueryContext[P]) -> Iterator[QueryContext[P]]:
    context.open()
    logger.debug("Opened query session on %s", type(context).__name__)
    try:
        yield context
    finally:
        context.close()
        logger.debug("Closed query session on %s", type(context).__name__)
