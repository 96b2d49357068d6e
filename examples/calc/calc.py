from rdcalc import ExpressionEvaluator, evaluate, RdcalcError


expressions = [
    "1 + 2 * 3",
    "(1 + 2) * 3",
    "-(1+1+1)--1",
    "10 / 2 / 5",
    "  3  +   4 ",
]


def main(debug=False):
    for input_str in expressions:
        res = evaluate(input_str, debug=debug, debug_colors=debug)
        print("Input:", input_str)
        print("Result =", res)

    assert float(ExpressionEvaluator("5 + 56 / 4 * 5 - 10 + 8 * 3")) \
        == 5. + 56 / 4 * 5 - 10 + 8 * 3

    try:
        evaluate("(1 + 1")
    except RdcalcError as e:
        print(e)


if __name__ == "__main__":
    main(debug=True)
