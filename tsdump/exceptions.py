__all__ = [
    "TreeDumpError",
    "UnbalancedTreeText",
    "UnknownLanguage",
    "MutuallyExclusiveOptions",
]


class TreeDumpError(Exception):
    """ Base class of the exceptions raised by tsdump """


class UnbalancedTreeText(TreeDumpError):
    """ An exception to signal that a closing parenthesis has no matching opening one """


class UnknownLanguage(TreeDumpError):
    """ An exception to signal that no grammar is registered under the given name """


class MutuallyExclusiveOptions(TreeDumpError):
    """ An exception to signal that two or more mutually exclusive CLI options are set """
