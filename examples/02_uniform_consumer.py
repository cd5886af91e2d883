from __future__ import annotations

from _infra import Label, Meters, banner, run

from hlists import NIL, HList


def report(seq: HList) -> str:
    # Only named operations: works for either representation.
    label = seq.get(Label)
    meters = seq.get(Meters)
    return f"{label.text}: {meters.value} m ({seq.length} fields, {seq.describe()})"


def main() -> None:
    banner("02_uniform_consumer: one consumer, two representations")

    left = NIL.append(Label("cable")).append(Meters(40.0))
    right = NIL.prepend(Meters(40.0)).prepend(Label("cable"))

    print(report(left))
    print(report(right))
    print("equal after invert:", left.invert() == right)


if __name__ == "__main__":
    run(main)
