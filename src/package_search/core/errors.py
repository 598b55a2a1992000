"""Errors raised by the search command."""


class SearchError(Exception):
    """Base error for a failed search invocation."""


class InputError(SearchError):
    """The user supplied no usable keywords."""


class FetchError(SearchError):
    """The remote package list could not be fetched or decoded."""
