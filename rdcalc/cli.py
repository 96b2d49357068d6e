#!/usr/bin/env python
import io
import sys
import click
from rdcalc import evaluate, RdcalcError
from rdcalc.termui import prints, h_print, a_print, result_print


QUIT_COMMANDS = ('q', 'quit', 'exit')


@click.group()
@click.option('--debug', default=False, is_flag=True,
              help="Debug/trace output.")
@click.option('--no-colors', default=False, is_flag=True,
              help="Disable output coloring.")
@click.pass_context
def rdcalc(ctx, debug, no_colors):
    """
    Command line interface for evaluating arithmetic expressions.
    """
    ctx.obj = {'debug': debug, 'colors': not no_colors}


@rdcalc.command(name='eval')
@click.option('--input-file', '-f', type=click.Path(),
              help="File with one expression per line")
@click.option('--input', '-i', help="Expression to evaluate")
@click.pass_context
def eval_(ctx, input_file, input):
    if not (input_file or input):
        prints('Expected either input_file or input string.')
        sys.exit(1)

    if input is not None:
        lines = [(1, input)]
    else:
        with io.open(input_file, 'r', encoding='utf-8') as f:
            lines = [(line_no, line.rstrip('\n\r'))
                     for line_no, line in enumerate(f, start=1)
                     if line.strip()]

    failed = 0
    for line_no, line in lines:
        if not evaluate_and_print(line, ctx.obj, file_name=input_file,
                                  first_line=line_no):
            failed += 1

    if failed:
        sys.exit(1)


@rdcalc.command()
@click.option('--prompt', '-p', default='> ', help="Input prompt")
@click.pass_context
def repl(ctx, prompt):
    """
    Reads expressions line by line and prints their values. Enter one of
    q, quit or exit (or end the input) to stop.
    """
    h_print('Enter an expression, or "q" to quit.', colors=ctx.obj['colors'])
    while True:
        try:
            line = input(prompt)
        except EOFError:
            break
        if line.strip() in QUIT_COMMANDS:
            break
        evaluate_and_print(line, ctx.obj)


def evaluate_and_print(line, options, file_name=None, first_line=1):
    """
    Evaluates a single line and prints the result, or the error to stderr.
    Returns True on success.
    """
    colors = options['colors']
    try:
        result = evaluate(line, file_name=file_name, first_line=first_line,
                          debug=options['debug'], debug_colors=colors)
    except RdcalcError as e:
        a_print("Error:", str(e), colors=colors, err=True)
        return False
    result_print(format_result(result), colors=colors)
    return True


def format_result(value):
    """
    Renders integral results without the trailing '.0'.
    """
    if value.is_integer():
        return str(int(value))
    return str(value)


if __name__ == '__main__':
    rdcalc()
