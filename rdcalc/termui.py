"""
Terminal output for the command line and the evaluation trace.

Colouring is decided by the caller on every call, nothing is remembered
between calls.
"""
import click

S_ATTENTION = {'fg': 'red', 'bold': True}
S_HEADER = {'fg': 'green'}
S_RESULT = {'fg': 'yellow', 'bold': True}

# One level per grammar rule in the trace.
INDENT = '  '


def prints(message, colors=False, err=False):
    click.echo(message, color=colors, err=err)


def styled(message, style, colors=False):
    if colors:
        return click.style(message, **style)
    return message


def _line(header, content, level, style, colors):
    content = f" {content}" if content != "" else ""
    return INDENT * level + styled(str(header), style, colors) + content


def h_print(header, content="", level=0, colors=False):
    prints(_line(header, content, level, S_HEADER, colors), colors)


def a_print(header, content="", level=0, colors=False, err=False):
    prints(_line(header, content, level, S_ATTENTION, colors), colors, err)


def result_print(result, colors=False):
    prints(styled(result, S_RESULT, colors), colors)
