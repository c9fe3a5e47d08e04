"""Value resolution for replacement fields."""

from pydantic_format.core.errors import FieldNumberingError
from pydantic_format.core.errors import IndexLookupError
from pydantic_format.core.errors import KeyLookupError
from pydantic_format.core.errors import UnusedArgumentError
from pydantic_format.template.enums import Numbering
from pydantic_format.template.types import ArgumentSet
from pydantic_format.template.types import FieldName


class ValueResolver:
    """Resolve field names against the arguments of one render call.

    The resolver owns the automatic-numbering counter, so one instance must be
    shared by the top-level template and every nested format spec of a single
    render call, and never reused across calls.
    """

    def __init__(self, arguments: ArgumentSet) -> None:
        """Initialize with the arguments of the render call."""
        self.arguments = arguments
        self.numbering: Numbering | None = None
        self.used_positional: set[int] = set()
        self.used_keywords: set[str] = set()
        self._next_index = 0

    def resolve(self, name: FieldName) -> object:
        """Return the value a field name refers to.

        Args:
            name: Parsed field name

        Returns:
            The argument with every accessor applied

        Raises:
            FieldNumberingError: When automatic and manual numbering are mixed
            IndexLookupError: When a positional index or ``[index]`` is missing
            KeyLookupError: When a keyword or ``[key]`` is missing
            AttributeLookupError: When a ``.attr`` is missing

        """
        value = self.lookup(self._argument_key(name))
        for accessor in name.accessors:
            value = accessor.apply(value)
        return value

    def lookup(self, key: int | str) -> object:
        """Fetch a positional (int) or keyword (str) argument."""
        if isinstance(key, int):
            try:
                value = self.arguments.positional[key]
            except IndexError as e:
                msg = f"Replacement index {key} out of range for positional args tuple"
                raise IndexLookupError(msg) from e
            self.used_positional.add(key)
            return value

        try:
            value = self.arguments.keywords[key]
        except KeyError as e:
            msg = f"Missing keyword argument '{key}'"
            raise KeyLookupError(msg) from e
        self.used_keywords.add(key)
        return value

    def check_unused(self) -> None:
        """Raise UnusedArgumentError if any argument was never looked up."""
        positional = [
            str(index)
            for index in range(len(self.arguments.positional))
            if index not in self.used_positional
        ]
        keywords = sorted(set(self.arguments.keywords) - self.used_keywords)

        if positional or keywords:
            msg_parts = []
            if positional:
                joined = ", ".join(positional)
                msg_parts.append(f"Unused positional arguments: {joined}")
            if keywords:
                msg_parts.append(f"Unused keyword arguments: {', '.join(keywords)}")
            raise UnusedArgumentError("; ".join(msg_parts))

    def _argument_key(self, name: FieldName) -> int | str:
        if name.argument is None:
            if self.numbering is Numbering.MANUAL:
                msg = (
                    "cannot switch from manual field specification to "
                    "automatic field numbering"
                )
                raise FieldNumberingError(msg)
            self.numbering = Numbering.AUTOMATIC
            index = self._next_index
            self._next_index += 1
            return index

        if isinstance(name.argument, int):
            if self.numbering is Numbering.AUTOMATIC:
                msg = (
                    "cannot switch from automatic field numbering to "
                    "manual field specification"
                )
                raise FieldNumberingError(msg)
            self.numbering = Numbering.MANUAL
        return name.argument
