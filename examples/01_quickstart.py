from __future__ import annotations

from _infra import Label, Meters, banner, run

from hlists import NIL, AmbiguousElementError
from kungfu import Error, Ok


def main() -> None:
    banner("01_quickstart: append + endpoints + invert + select")

    seq = NIL.append(Label("rope")).append(Meters(12.5)).append(3)
    print(seq, seq.shape())
    print("first:", seq.first(), "last:", seq.last(), "length:", seq.length)

    match seq.select(Meters):
        case Ok(meters):
            print(f"rope is {meters.value} m long")
        case Error(err):
            print(f"error: {err}")

    right = seq.invert()
    print(right, right.to_pairs())

    pair = right.prepend(7)
    try:
        pair.get(int)
    except AmbiguousElementError as err:
        print(f"ambiguous: {err}")
        print("head int:", pair.get(int, err.candidates[0]))

    with pair.last_mut() as slot:
        slot.update(lambda n: n * 10)
    print("after update:", pair)


if __name__ == "__main__":
    run(main)
