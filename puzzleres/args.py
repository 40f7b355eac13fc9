"""Splitting of a raw command line into arguments."""

_WHITESPACE = frozenset(" \t\n\r")


def command_line_to_argv(command_line):
    """Split a command line into arguments.

    Arguments are separated by spaces, tabs and line breaks.
    Double quotes group text, whitespace included, into one argument.
    The quote characters themselves are dropped, and a pair of quotes
    with nothing between them still yields an empty argument.
    """
    args = []
    in_quotes = False
    in_space = True

    for ch in command_line:
        if in_quotes:
            if ch == '"':
                in_quotes = False
            else:
                args[-1].append(ch)
        elif ch == '"':
            in_quotes = True
            if in_space:
                args.append([])
            in_space = False
        elif ch in _WHITESPACE:
            in_space = True
        else:
            if in_space:
                args.append([])
            args[-1].append(ch)
            in_space = False

    return ["".join(chars) for chars in args]