"""
Property access and value rendering for record dumps.
"""

import inspect
from collections.abc import Mapping
from typing import Any, Callable, List, Optional, Sequence

from .types import AccessorMissingError, DumpFailedError, RecordDescriptor

NULL_TEXT = "null"


def simple_type_name(value: Any) -> str:
    """Unqualified class name of a value."""
    return type(value).__name__


def element_name_for(value: Any) -> str:
    return simple_type_name(value).lower()


def getter_name(property_name: str) -> str:
    """Conventional getter name: ``age`` -> ``getAge``."""
    if not property_name:
        raise ValueError("Property name must not be empty")
    return "get" + property_name[0].upper() + property_name[1:]


def render_value(value: Any) -> str:
    """Canonical text for a property value."""
    if value is None:
        return NULL_TEXT
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return str(value)


def _callable_without_arguments(func: Callable) -> bool:
    try:
        inspect.signature(func).bind()
    except TypeError:
        return False
    except ValueError:
        # no signature available (some builtins); let the call decide
        return True
    return True


class PropertyReader:
    """
    Resolves named properties on record values.

    Lookup order per property: ``get<Name>()`` getter, then a plain attribute,
    then a mapping key. A RecordDescriptor, when given, is used instead.
    """

    def __init__(self, descriptor: Optional[RecordDescriptor] = None):
        self.descriptor = descriptor

    def read(self, value: Any, property_name: str) -> Any:
        if self.descriptor is not None:
            accessor = lambda: self.descriptor.read(value, property_name)  # noqa: E731
        else:
            accessor = self.resolve(value, property_name)

        try:
            return accessor()
        except AccessorMissingError:
            raise
        except Exception as e:
            raise DumpFailedError(
                f"Error reading property '{property_name}' of "
                f"{simple_type_name(value)}: {e}"
            ) from e

    def read_text(self, value: Any, property_name: str) -> str:
        return render_value(self.read(value, property_name))

    def resolve(self, value: Any, property_name: str) -> Callable[[], Any]:
        """Find a zero-argument accessor for the property on ``value``."""
        type_name = simple_type_name(value)
        name = getter_name(property_name)

        getter = getattr(value, name, None)
        if getter is not None:
            if callable(getter) and _callable_without_arguments(getter):
                return getter
            raise AccessorMissingError(
                f"{type_name}.{name} is not callable without arguments",
                property_name=property_name,
                type_name=type_name,
            )

        if isinstance(value, Mapping):
            if property_name in value:
                return lambda: value[property_name]
        else:
            try:
                attribute = getattr(value, property_name)
            except AttributeError:
                pass
            else:
                if not callable(attribute):
                    return lambda: attribute

        raise AccessorMissingError(
            f"No accessor for property '{property_name}' on {type_name} "
            f"(expected {name}() or attribute '{property_name}')",
            property_name=property_name,
            type_name=type_name,
        )


def validate_property_names(property_names: Sequence[str]) -> List[str]:
    """Check property names are non-empty strings and return them as a list."""
    names = list(property_names)
    for name in names:
        if not isinstance(name, str) or not name:
            raise DumpFailedError(f"Invalid property name: {name!r}")
    return names
