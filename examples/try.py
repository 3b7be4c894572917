from calcparse import ParsingError, UnboundIdentifier, evaluate, tokenize


def ex_eval(source: str):
    try:
        return evaluate(source)
    except (ParsingError, UnboundIdentifier) as e:
        return repr(e)


def demo1():
    for source in ["123", "(123 + 456 ) + pi", "10 + (100 + 1)", "((1 + 2) + (3 + 4)) + 5 + 6"]:
        print(f"source: {source!r}, parsed: {ex_eval(source)!r}")


def demo2():
    source = "(test 12 test1  100.00)"
    print(f"source: {source!r}, tokens: {[t.name for t in tokenize(source)]}")


if __name__ == '__main__':
    demo1()
    demo2()
