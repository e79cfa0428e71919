"""Exception hierarchy for yaml12.

Every failure raised by the conversion layer derives from YAMLError.
Errors that can be located in the source text derive from MarkedYAMLError,
which formats context and problem marks the same way PyYAML does.
"""


class YAMLError(Exception):
    """Base exception for YAML errors."""
    pass


class MarkedYAMLError(YAMLError):
    """YAML error with position marks.

    Attributes:
        context: Description of the parsing context
        context_mark: Mark pointing to the context
        problem: Description of the problem
        problem_mark: Mark pointing to the problem
        note: Additional note about the error
    """

    def __init__(self, context=None, context_mark=None,
                 problem=None, problem_mark=None, note=None):
        super().__init__(problem if problem is not None else context)
        self.context = context
        self.context_mark = context_mark
        self.problem = problem
        self.problem_mark = problem_mark
        self.note = note

    def __str__(self):
        lines = []
        if self.context is not None:
            lines.append(self.context)
        if self.context_mark is not None \
                and (self.problem is None or self.problem_mark is None
                     or self.context_mark.name != self.problem_mark.name
                     or self.context_mark.line != self.problem_mark.line
                     or self.context_mark.column != self.problem_mark.column):
            lines.append(str(self.context_mark))
        if self.problem is not None:
            lines.append(self.problem)
        if self.problem_mark is not None:
            lines.append(str(self.problem_mark))
        if self.note is not None:
            lines.append(self.note)
        return '\n'.join(lines)


class ParseError(MarkedYAMLError):
    """Malformed YAML text, reported by the underlying parser."""

    @classmethod
    def from_engine(cls, exc):
        """Wrap a PyYAML error, keeping its marks when it has them."""
        if not hasattr(exc, 'problem_mark'):
            return cls(problem='YAML parse error: %s' % exc)
        context = 'YAML parse error'
        if exc.context is not None:
            context += ': %s' % exc.context
        return cls(context, exc.context_mark, exc.problem,
                   exc.problem_mark, exc.note)


class UnsupportedConstructError(MarkedYAMLError):
    """A YAML construct the conversion layer does not model (aliases)."""
    pass


class MalformedScalarError(UnsupportedConstructError):
    """A scalar whose text does not fit its explicit core-schema tag."""
    pass


class EmitterError(YAMLError):
    """The YAML writer rejected a node tree."""
    pass


class NestingDepthError(YAMLError):
    """Input nested deeper than the configured maximum depth."""

    def __init__(self, max_depth):
        super().__init__(
            "maximum nesting depth of %d exceeded" % max_depth)
        self.max_depth = max_depth


class TypeMismatchError(YAMLError, TypeError):
    """A host value whose type has no YAML representation."""
    pass


class MalformedTagError(YAMLError, ValueError):
    pass


class MalformedKeyError(YAMLError, ValueError):
    pass


class InvalidTemporalValueError(YAMLError, ValueError):
    pass
