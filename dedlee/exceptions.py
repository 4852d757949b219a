"""
# Dedlee: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class CommittedMutateException(Exception):
    pass


class EmptySourceError(Exception):
    _source_name: str

    def __init__(self, source_name: str = ''):
        super().__init__(source_name)
        self._source_name = source_name

    @property
    def source_name(self) -> str:
        return self._source_name

    def __str__(self) -> str:
        if self._source_name:
            return f'`{self._source_name}` has no lines other than blank lines and comments'

        return 'source has no lines other than blank lines and comments'


class UncommittedApplyException(Exception):
    pass
