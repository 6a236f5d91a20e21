"""
Instance creators for declared types that cannot be constructed directly.

The validations document carries no type tag, so abstract declared types
such as :class:`ValidationError` need a registered concrete stand-in.
"""
import inspect
import logging
from typing import Callable, Dict, Optional

from submission_decoder.decoding.errors import NoConcreteTypeError
from submission_decoder.models.validation import CheckstyleValidationError, ValidationError

logger = logging.getLogger(__name__)

InstanceCreator = Callable[[], object]


class InstanceCreatorRegistry:
    """Maps declared types to factories producing empty concrete instances."""

    def __init__(self, creators: Optional[Dict[type, InstanceCreator]] = None) -> None:
        self._creators: Dict[type, InstanceCreator] = dict(creators or {})

    def register(self, declared_type: type, creator: InstanceCreator) -> None:
        self._creators[declared_type] = creator

    def is_registered(self, declared_type: type) -> bool:
        return declared_type in self._creators

    def create(self, declared_type: type):
        """
        Return a fresh instance standing in for *declared_type*.

        A registered factory always wins; an unregistered concrete type is
        default-constructed; an unregistered abstract type is an error.
        """
        creator = self._creators.get(declared_type)
        if creator is not None:
            return creator()
        if inspect.isabstract(declared_type):
            logger.warning("No instance creator for abstract type %s", declared_type.__name__)
            raise NoConcreteTypeError(declared_type)
        return declared_type()


def default_instance_creators() -> InstanceCreatorRegistry:
    return InstanceCreatorRegistry({ValidationError: CheckstyleValidationError})
