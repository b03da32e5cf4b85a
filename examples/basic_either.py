"""
Basic Either usage: building, transforming, folding and flattening.

Run: python examples/basic_either.py
"""
from eitherpy import Either, ConsoleLogger, traced, flatten, merge


def parse_port(raw: str) -> Either[str, int]:
    if not raw.isdigit():
        return Either.of_left(f"not a number: {raw!r}")
    return Either.of_right(int(raw))


def main():
    logger = ConsoleLogger("demo", level="DEBUG")
    log_step = traced(logger, "parsed port")

    for raw in ("8080", "http"):
        e = log_step(parse_port(raw))
        # Keep ports in range, otherwise move to the Left side
        checked = e.flat_map_right(lambda p: Either.of_right(p) if p < 65536 else Either.of_left("out of range"))
        print(raw, "=>", checked.fold(lambda err: f"error: {err}", lambda p: f"port {p}"))

    # Same-typed sides can be merged, nested ones flattened
    print("merge =>", merge(Either.of_left("either side")))
    print("flatten =>", flatten(Either.of_right(Either.of_left("y"))))   # Right['y']


if __name__ == "__main__":
    main()
