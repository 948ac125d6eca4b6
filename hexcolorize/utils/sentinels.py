from __future__ import annotations


class _NotProvided:
    """Marks a keyword argument the caller left unset.

    Lets the fluent config methods tell "not passed" apart from an explicit
    ``None`` or ``False``.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NotProvided"

    def __bool__(self) -> bool:
        return False


NotProvided = _NotProvided()
