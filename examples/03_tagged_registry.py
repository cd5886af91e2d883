from __future__ import annotations

from _infra import Label, Meters, banner, run

from hlists import NIL, TagCollisionError, TagPolicy, check_unique_tags
from kungfu import Error, Ok


def main() -> None:
    banner("03_tagged_registry: explicit tags + lookup policy")

    registry = (
        NIL.append_indexed(Label("spool"))
        .append_indexed(Meters(100.0), tag=10)
        .append_indexed(Meters(25.0))
    )
    print(registry, registry.tags())
    print("tag 10:", registry.get_tagged(10))

    clashing = registry.append_indexed(Label("offcut"), tag=0)
    match check_unique_tags(clashing):
        case Ok(_):
            print("tags are unique")
        case Error(err):
            print(f"collision: {err}")

    try:
        clashing.get_tagged(0)
    except TagCollisionError as err:
        print(f"rejected: {err}")
    print("last wins:", clashing.get_tagged(0, policy=TagPolicy(on_collision="last")))

    print("plain:", clashing.unindexed())


if __name__ == "__main__":
    run(main)
