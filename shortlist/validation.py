import functools
import inspect
import operator
import re
from shortlist.py import cutoff_str, display


class InvalidOptionValue(Exception):
    pass


class InvalidCapacity(ValueError):
    def __init__(self, capacity):
        self.capacity = capacity
        super().__init__(f"Capacity must be a positive integer, but got {cutoff_str(display(capacity), 100)}.")


def check_capacity(capacity) -> int:
    """
    Checks that ``capacity`` is a positive integer and returns it as an :class:`int`.

    Any object supporting ``__index__`` (e.g., ``numpy.int64``) is accepted. Raises :exc:`TypeError` for
    non-integers (including ``bool``) and :exc:`InvalidCapacity` for integers smaller than one.
    """
    if isinstance(capacity, bool):
        raise TypeError(f"Capacity must be an integer, but got {cutoff_str(display(capacity), 100)}.")
    try:
        capacity = operator.index(capacity)
    except TypeError:
        raise TypeError(
            f"Capacity must be an integer, but got {type(capacity).__name__} {cutoff_str(display(capacity), 100)}."
        )
    if capacity < 1:
        raise InvalidCapacity(capacity)
    return capacity


def check_option(name, value, options, ignore_list=[]):
    """
    Checks that an option has a valid value, raising :class:`InvalidOptionValue` otherwise.

    :param name: The name of the option to check.
    :param value: The value of the option.
    :param options: List of valid option values.
    :param ignore_list: Do not raise an error if value is in this list.

    .. rubric:: Example

    .. code-block::

        EXTRACTION = check_option(
            'SHORTLIST_EXTRACTION', os.getenv('SHORTLIST_EXTRACTION'), ['safe', 'fast'], ignore_list=[None, '']
        ) or 'safe'

    """
    if value not in options and value not in ignore_list:
        raise InvalidOptionValue(
            f"Invalid option value {name}={value}. Use one of {options}."
        )
    return value


class ParameterChoiceError(ValueError):
    def __init__(self, name, err_value, values):
        super().__init__(f"Parameter {name}={err_value} needs to be one of {values}.")


# Parameter validation.
def choices(name, values, multi=False, doc=True):
    """
    Will only check the value if it is provided explicitly by the user - default values are not checked.

    :param name: The parameter name.
    :param values: The valid choices as an iterable.
    :param multi: If ``True``, ``lists``, ``tuples`` or ``sets`` of the allowed values also allowed.
    :param doc: If ``True``, the choices are appended afer the ``:param <param name>:`` string (if any) in the doc string.
    """

    values = list(values)

    def wrapper(fxn):
        if doc and fxn.__doc__:
            fxn.__doc__ = re.sub(
                f"(:\\s*param\\s+){name}(\\s*:)",
                f"\\1{name}\\2 ``{values}{' (or combinations)' if multi else ''}``",
                fxn.__doc__,
            )

        signature = inspect.signature(fxn)

        @functools.wraps(fxn)
        def check_and_call(*args, **kwargs):
            params = signature.bind(*args, **kwargs)
            if name in params.arguments and not (
                (err_value := (in_value := params.arguments[name])) in values
                or (
                    multi
                    and isinstance(in_value, (tuple, list, set))
                    and not (
                        err_value := list(filter(lambda _v: _v not in values, in_value))
                    )
                )
            ):
                raise ParameterChoiceError(name, err_value, values)

            return fxn(*args, **kwargs)

        return check_and_call

    return wrapper
